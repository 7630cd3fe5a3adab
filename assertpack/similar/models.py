"""Data models for similarity hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from assertpack.core.types import SimilarityKind


@dataclass(frozen=True, slots=True)
class SimilarityCandidate:
    """One ranked hint: a near miss for the value that was not found.

    ``position`` is the index in the searched sequence, the mapping key when
    the candidates came from a mapping, or the character offset for
    substring matches.
    """

    candidate: Any
    distance: float
    kind: SimilarityKind
    position: Any
    details: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "candidate": self.candidate,
            "distance": self.distance,
            "kind": self.kind,
            "position": self.position,
            "details": self.details,
        }
