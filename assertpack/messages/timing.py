"""Time equality explanations."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.messages.base import DiagnosticMessage, Row, labeled
from assertpack.render.values import format_time, format_value, humanize_duration

_EPOCH = datetime(1970, 1, 1)


def explain_same_time(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    if not isinstance(actual, datetime) or not isinstance(expected, datetime):
        rows: list[Row] = [("Expected", format_value(expected)), ("Actual", format_value(actual))]
        return DiagnosticMessage(
            headline="Expected two datetimes to compare",
            details=tuple(labeled(rows)),
        )

    if options.ignore_timezone:
        actual = actual.replace(tzinfo=None)
        expected = expected.replace(tzinfo=None)

    if (actual.tzinfo is None) != (expected.tzinfo is None):
        rows = [("Expected", format_time(expected)), ("Actual", format_time(actual))]
        return DiagnosticMessage(
            headline="Expected times to be the same, but one is timezone-aware and the other is naive",
            details=tuple(labeled(rows)),
            hints=("Note: use ignore_timezone to compare wall-clock times",),
        )

    if options.truncate is not None:
        actual = truncate_time(actual, options.truncate)
        expected = truncate_time(expected, options.truncate)

    difference = actual - expected
    human = humanize_duration(difference)
    relation = "earlier" if difference < timedelta(0) else "later"
    rows = [
        ("Expected", format_time(expected)),
        ("Actual", f"{format_time(actual)} ({human} {relation})"),
    ]
    return DiagnosticMessage(
        headline=f"Expected times to be the same, but difference is {human}",
        details=tuple(labeled(rows)),
    )


def truncate_time(moment: datetime, step: timedelta) -> datetime:
    """Round ``moment`` down to a multiple of ``step`` since the epoch."""
    if moment.tzinfo is None:
        origin = _EPOCH
    else:
        origin = _EPOCH.replace(tzinfo=timezone.utc)
    return moment - (moment - origin) % step
