"""Sortedness, range, threshold and tolerance explanations."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.shapes import classify, sequence_items
from assertpack.core.types import ComparisonOperator
from assertpack.messages.base import DiagnosticMessage, Row, labeled
from assertpack.render.values import format_number, format_signed, format_value

_LARGE_COLLECTION = 100

_OPERATOR_PHRASES: dict[str, str] = {
    "greater": "greater than",
    "less": "less than",
    "greater_or_equal": "greater than or equal to",
    "less_or_equal": "less than or equal to",
}

_OPERATOR_HINTS: dict[str, str] = {
    "greater": "Value should be larger than threshold",
    "less": "Value should be smaller than threshold",
    "greater_or_equal": "Value should be larger than or equal to threshold",
    "less_or_equal": "Value should be smaller than or equal to threshold",
}


@dataclass(frozen=True, slots=True)
class SortViolation:
    index: int
    value: Any
    following: Any


def find_sort_violations(items: list[Any], *, limit: int) -> tuple[list[SortViolation], int]:
    """First ``limit`` descending adjacent pairs and the total number found."""
    violations: list[SortViolation] = []
    total = 0
    for index in range(len(items) - 1):
        if items[index] > items[index + 1]:
            total += 1
            if len(violations) < limit:
                violations.append(SortViolation(index, items[index], items[index + 1]))
    return violations, total


def explain_sorted(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    items = sequence_items(actual) if classify(actual) == "sequence" else []
    headline = "Expected collection to be in ascending order, but it is not:"

    if len(items) > _LARGE_COLLECTION:
        collection = f"[Large collection] (total: {len(items)} elements)"
    else:
        collection = f"(total: {len(items)} elements)"

    try:
        violations, total = find_sort_violations(items, limit=config.max_sort_violations)
    except TypeError:
        rows: list[Row] = [
            ("Collection", collection),
            ("Status", "elements are not mutually comparable"),
        ]
        return DiagnosticMessage(headline=headline, details=tuple(labeled(rows)))

    if total == 0:
        rows = [("Collection", collection), ("Status", "no order violations found")]
        return DiagnosticMessage(headline=headline, details=tuple(labeled(rows)))

    status = "1 order violation found" if total == 1 else f"{total} order violations found"
    rows = [("Collection", collection), ("Status", status), ("Problems", "")]
    details = labeled(rows)
    details[-1] = details[-1].rstrip()

    shown = violations[: config.shown_sort_violations]
    for violation in shown:
        details.append(
            f"  - Index {violation.index}: {format_value(violation.value)} > "
            f"{format_value(violation.following)}"
        )
    remaining = total - len(shown)
    if remaining == 1:
        details.append("  - ... and 1 more violation")
    elif remaining > 1:
        details.append(f"  - ... and {remaining} more violations")

    return DiagnosticMessage(headline=headline, details=tuple(details))


def explain_in_range(
    actual: Any,
    minimum: Any,
    maximum: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    bounds = f"[{format_value(minimum)}, {format_value(maximum)}]"
    value = format_value(actual)

    if actual < minimum:
        rows: list[Row] = [
            ("Value", value),
            ("Range", bounds),
            (
                "Distance",
                f"{format_number(minimum - actual)} below minimum ({value} < {format_value(minimum)})",
            ),
        ]
        return DiagnosticMessage(
            headline=f"Expected value to be in range {bounds}, but it was below:",
            details=tuple(labeled(rows, indent="  ")),
            hints=(f"Hint: Value should be >= {format_value(minimum)}",),
        )

    if actual > maximum:
        rows = [
            ("Value", value),
            ("Range", bounds),
            (
                "Distance",
                f"{format_number(actual - maximum)} above maximum ({value} > {format_value(maximum)})",
            ),
        ]
        return DiagnosticMessage(
            headline=f"Expected value to be in range {bounds}, but it was above:",
            details=tuple(labeled(rows, indent="  ")),
            hints=(f"Hint: Value should be <= {format_value(maximum)}",),
        )

    rows = [("Value", value), ("Range", bounds)]
    return DiagnosticMessage(
        headline=f"Expected value to be in range {bounds}, but it could not be placed",
        details=tuple(labeled(rows, indent="  ")),
    )


def explain_compare(
    actual: Any,
    threshold: Any,
    operator: ComparisonOperator,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    phrase = _OPERATOR_PHRASES[operator]
    difference = actual - threshold

    if difference > 0:
        summary = f"{format_signed(difference)} (value is {format_number(difference)} greater)"
    elif difference < 0:
        summary = f"{format_number(difference)} (value is {format_number(-difference)} smaller)"
    else:
        summary = "0 (values are equal)"

    rows: list[Row] = [
        ("Value", format_value(actual)),
        ("Threshold", format_value(threshold)),
        ("Difference", summary),
    ]

    violated = {
        "greater": difference <= 0,
        "less": difference >= 0,
        "greater_or_equal": difference < 0,
        "less_or_equal": difference > 0,
    }[operator]
    hints = (f"Hint: {_OPERATOR_HINTS[operator]}",) if violated else ()

    return DiagnosticMessage(
        headline=f"Expected value to be {phrase} threshold:",
        details=tuple(labeled(rows, indent="  ")),
        hints=hints,
    )


def explain_within(
    actual: Any,
    expected: Any,
    tolerance: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    actual_value = float(actual)
    expected_value = float(expected)
    tolerance_value = float(tolerance)
    difference = abs(actual_value - expected_value)

    pattern = choose_float_format(actual_value, expected_value, difference, tolerance_value)
    headline = (
        f"Expected {pattern.format(actual_value)} to be within "
        f"±{pattern.format(tolerance_value)} of {pattern.format(expected_value)}"
    )

    summary = pattern.format(difference)
    if tolerance_value > 0:
        excess = (difference - tolerance_value) / tolerance_value
        if excess > 2:
            summary += f" ({excess:.2f}× greater than tolerance)"
        elif excess > 0:
            summary += f" ({100 * excess:.2f}% greater than tolerance)"

    return DiagnosticMessage(headline=headline, details=(f"Difference: {summary}",))


def choose_float_format(*values: float) -> str:
    """Scientific notation only for very large or very small magnitudes."""
    finite = [abs(value) for value in values if math.isfinite(value)]
    largest = max(finite, default=0.0)
    smallest_nonzero = min((value for value in finite if value > 0), default=math.inf)
    if largest >= 1e6 or smallest_nonzero < 1e-6:
        return "{:.6e}"
    return "{:.6f}"
