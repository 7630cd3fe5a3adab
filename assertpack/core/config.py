"""Engine thresholds and per-call formatting options."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import timedelta
from typing import Any

from assertpack.core.exceptions import EngineConfigError


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable thresholds shared by every sub-engine.

    Passed to ``Explainer`` at construction; never mutated afterwards.
    """

    max_similar: int = 3
    similarity_query_cap: int = 20
    similarity_divisor: int = 4
    numeric_proximity_delta: float = 10
    neighbor_window: int = 2
    sorted_view_min_size: int = 10
    inline_string_limit: int = 80
    line_width: int = 56
    head_lines: int = 5
    tail_lines: int = 3
    inline_items: int = 5
    preview_items: int = 3
    edge_items: int = 5
    max_diff_depth: int = 32
    max_diff_lines: int = 8
    max_sort_violations: int = 6
    shown_sort_violations: int = 5
    close_matches: int = 2
    concise_string_limit: int = 30
    record_char_budget: int = 80

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise EngineConfigError(f"{item.name} must be a number")
            if item.name == "numeric_proximity_delta":
                if value < 0:
                    raise EngineConfigError("numeric_proximity_delta must be >= 0")
                continue
            if not isinstance(value, int):
                raise EngineConfigError(f"{item.name} must be an integer")
            if value < 1:
                raise EngineConfigError(f"{item.name} must be >= 1")

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


DEFAULT_CONFIG = EngineConfig()


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Caller-supplied options for a single diagnostic call."""

    message: str | None = None
    ignore_case: bool = False
    stack_trace: bool = False
    ignore_timezone: bool = False
    truncate: timedelta | None = None
    max_items: int | None = None

    def __post_init__(self) -> None:
        if self.max_items is not None and self.max_items < 1:
            raise EngineConfigError("max_items must be >= 1 when provided")
        if self.truncate is not None and self.truncate <= timedelta(0):
            raise EngineConfigError("truncate must be a positive duration")

    @classmethod
    def from_dict(cls, raw: Any) -> "FormatOptions":
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise EngineConfigError("options must be an object")
        unknown = sorted(set(raw) - _OPTION_KEYS)
        if unknown:
            raise EngineConfigError(f"Unsupported option(s): {', '.join(unknown)}")

        message = raw.get("message")
        if message is not None and not isinstance(message, str):
            raise EngineConfigError("message must be a string")
        for name in _FLAG_KEYS:
            if not isinstance(raw.get(name, False), bool):
                raise EngineConfigError(f"{name} must be a boolean")
        max_items = raw.get("max_items")
        if max_items is not None and (isinstance(max_items, bool) or not isinstance(max_items, int)):
            raise EngineConfigError("max_items must be an integer")
        truncate_seconds = raw.get("truncate_seconds")
        if truncate_seconds is not None and (
            isinstance(truncate_seconds, bool) or not isinstance(truncate_seconds, (int, float))
        ):
            raise EngineConfigError("truncate_seconds must be a number")
        try:
            truncate = timedelta(seconds=truncate_seconds) if truncate_seconds is not None else None
        except (OverflowError, ValueError) as error:
            raise EngineConfigError(f"truncate_seconds is out of range: {truncate_seconds}") from error

        return cls(
            message=message,
            ignore_case=raw.get("ignore_case", False),
            stack_trace=raw.get("stack_trace", False),
            ignore_timezone=raw.get("ignore_timezone", False),
            truncate=truncate,
            max_items=max_items,
        )


_FLAG_KEYS = ("ignore_case", "stack_trace", "ignore_timezone")

_OPTION_KEYS = frozenset(
    {
        "message",
        "ignore_case",
        "stack_trace",
        "ignore_timezone",
        "truncate_seconds",
        "max_items",
    }
)

DEFAULT_OPTIONS = FormatOptions()
