"""Single-value representations used across all diagnostic messages."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
import json
import math
from typing import Any

from assertpack.core.canonical import canonical_keys, safe_repr
from assertpack.core.config import DEFAULT_CONFIG, EngineConfig
from assertpack.core.shapes import classify, record_fields, sequence_items

_CONCISE_DEPTH = 3


def quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def format_value(value: Any) -> str:
    """Full, untruncated representation of a value."""
    return _format(value, frozenset())


def _format(value: Any, active: frozenset[int]) -> str:
    shape = classify(value)
    if shape == "nullable":
        return "None"
    if shape == "scalar":
        return format_scalar(value)

    marker = id(value)
    if marker in active:
        return "<...>"
    nested = active | {marker}

    if shape == "mapping":
        pairs = [
            f"{_format(key, nested)}: {_format(value[key], nested)}"
            for key in canonical_keys(value)
        ]
        return "{" + ", ".join(pairs) + "}"

    if shape == "record":
        parts = [f"{name}={_format(field_value, nested)}" for name, field_value in record_fields(value)]
        return f"{type(value).__name__}(" + ", ".join(parts) + ")"

    if isinstance(value, range):
        return repr(value)
    elements = [_format(item, nested) for item in sequence_items(value)]
    opening, closing = _brackets(value)
    if isinstance(value, tuple) and len(elements) == 1:
        return f"({elements[0]},)"
    return opening + ", ".join(elements) + closing


def format_scalar(value: Any) -> str:
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, (int, float, Decimal)):
        return format_number(value)
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, timedelta):
        return humanize_duration(value)
    return safe_repr(value)


def format_number(value: Any) -> str:
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return repr(value)
    return str(value)


def format_signed(value: Any) -> str:
    rendered = format_number(value)
    if value > 0:
        return f"+{rendered}"
    return rendered


def format_concise(value: Any, config: EngineConfig = DEFAULT_CONFIG) -> str:
    """Bounded representation for diff lines and close-match summaries."""
    return _concise(value, config, 0)


def _concise(value: Any, config: EngineConfig, depth: int) -> str:
    shape = classify(value)
    if shape == "nullable":
        return "None"

    if depth > _CONCISE_DEPTH and shape in ("mapping", "sequence", "record"):
        return "..."

    if shape == "mapping":
        if len(value) == 0:
            return "{}"
        if len(value) == 1:
            key = next(iter(value))
            return f"{{{_concise(key, config, depth + 1)}: {_concise(value[key], config, depth + 1)}}}"
        return f"{{{len(value)} entries}}"

    if shape == "sequence":
        items = sequence_items(value)
        if not items:
            return "[]"
        if len(items) <= 3:
            return "[" + ", ".join(_concise(item, config, depth + 1) for item in items) + "]"
        return f"[{len(items)} items]"

    if shape == "record":
        return format_record_truncated(value, config)

    if isinstance(value, str):
        limit = config.concise_string_limit
        if len(value) > limit:
            return quote(value[: max(0, limit - 3)] + "...")
        return quote(value)

    rendered = format_scalar(value)
    if len(rendered) > 40:
        return rendered[:37] + "..."
    return rendered


def format_record_truncated(value: Any, config: EngineConfig = DEFAULT_CONFIG) -> str:
    parts: list[str] = []
    char_count = 0
    for name, field_value in record_fields(value):
        rendered = f"{name}={_format_field_truncated(field_value)}"
        if char_count + len(rendered) > config.record_char_budget and parts:
            parts.append("...")
            break
        parts.append(rendered)
        char_count += len(rendered)
    return f"{type(value).__name__}(" + ", ".join(parts) + ")"


def _format_field_truncated(value: Any) -> str:
    shape = classify(value)
    if shape == "nullable":
        return "None"
    if shape == "record":
        return f"{type(value).__name__}(...)"
    if shape in ("mapping", "sequence"):
        size = len(value)
        if size == 0:
            return f"{type(value).__name__}()"
        return f"{type(value).__name__}({size} items)"
    if isinstance(value, str):
        if len(value) > 20:
            return quote(value[:17] + "...")
        return quote(value)
    return format_scalar(value)


def humanize_duration(duration: timedelta) -> str:
    """Short duration text such as ``150ms``, ``2.5s``, ``10m30s`` or ``1d1h``."""
    total = abs(duration)
    micros = total // timedelta(microseconds=1)

    if micros < 1_000:
        return f"{micros / 1_000:.3f}ms"
    if micros < 1_000_000:
        millis = micros / 1_000
        return f"{millis:.0f}ms" if millis.is_integer() else f"{millis:.1f}ms"
    if micros < 60_000_000:
        seconds = micros / 1_000_000
        return f"{seconds:.0f}s" if seconds.is_integer() else f"{seconds:.1f}s"

    whole_seconds = micros // 1_000_000
    if whole_seconds < 3_600:
        minutes, seconds = divmod(whole_seconds, 60)
        return f"{minutes}m" if seconds == 0 else f"{minutes}m{seconds}s"
    if whole_seconds < 86_400:
        hours, remainder = divmod(whole_seconds, 3_600)
        minutes = remainder // 60
        return f"{hours}h" if minutes == 0 else f"{hours}h{minutes}m"
    days, remainder = divmod(whole_seconds, 86_400)
    hours = remainder // 3_600
    return f"{days}d" if hours == 0 else f"{days}d{hours}h"


def format_time(moment: datetime) -> str:
    """``YYYY-MM-DD HH:MM:SS[.ffffff] TZ`` with trailing fraction zeros trimmed."""
    rendered = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        rendered += "." + f"{moment.microsecond:06d}".rstrip("0")
    if moment.tzinfo is not None:
        rendered += f" {moment.tzname() or 'UTC'}"
    return rendered


def _brackets(value: Any) -> tuple[str, str]:
    if isinstance(value, tuple):
        return "(", ")"
    if isinstance(value, (set, frozenset)):
        return "{", "}"
    return "[", "]"
