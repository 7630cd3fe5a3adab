"""Data models for sorted-order insertion lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class InsertionContext:
    """Where a missing value would sit in the sorted view of a collection.

    ``sorted_window`` is the slice ``[window_start:window_end]`` of the sorted
    copy; ``insert_index`` is the leftmost insertion point, or ``-1`` when
    there is nothing to insert into.
    """

    query: Any
    total: int
    insert_index: int = -1
    below: Any = None
    above: Any = None
    found: bool = False
    sorted_window: tuple[Any, ...] = ()
    window_start: int = 0
    window_end: int = 0
    unsupported_reason: str | None = None

    @property
    def has_neighbors(self) -> bool:
        return self.below is not None or self.above is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "total": self.total,
            "insert_index": self.insert_index,
            "below": self.below,
            "above": self.above,
            "found": self.found,
            "sorted_window": list(self.sorted_window),
            "window_start": self.window_start,
            "window_end": self.window_end,
            "unsupported_reason": self.unsupported_reason,
        }
