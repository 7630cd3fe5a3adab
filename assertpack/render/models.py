"""Data models for bounded content rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RenderConstraints:
    """Per-call-site truncation limits.

    Collections with more than ``max_items`` elements are cut down to
    ``head_items`` leading elements (``max_items`` when unset) plus
    ``tail_items`` trailing ones.
    """

    max_items: int | None = None
    head_items: int | None = None
    tail_items: int = 0


@dataclass(frozen=True, slots=True)
class FormattedBlock:
    """Rendered text plus the counts needed to reconstruct the original size."""

    lines: tuple[str, ...]
    total_count: int
    shown: int
    truncated: bool

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": list(self.lines),
            "total_count": self.total_count,
            "shown": self.shown,
            "truncated": self.truncated,
        }
