"""Data models for structural diffs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from assertpack.core.types import DiffKind

ROOT_LOCATION = "<value>"


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """A single difference at a path inside two compared values.

    An empty ``path`` means the top-level values differ with no deeper
    structure to walk.
    """

    path: tuple[Any, ...]
    location: str
    expected_repr: str
    actual_repr: str
    kind: DiffKind = "changed"

    @property
    def display_location(self) -> str:
        return self.location or ROOT_LOCATION

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "location": self.location,
            "expected": self.expected_repr,
            "actual": self.actual_repr,
            "kind": self.kind,
        }
