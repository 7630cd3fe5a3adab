"""Equality and inequality explanations."""

from __future__ import annotations

from typing import Any

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.shapes import inspect_value
from assertpack.diff import diff_values, render_diff_entries
from assertpack.messages.base import DiagnosticMessage, Row, edge_constraints, labeled
from assertpack.render import render_value

_COMPOSITE = frozenset({"sequence", "mapping", "record"})


def explain_equal(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    expected_info = inspect_value(expected)
    actual_info = inspect_value(actual)
    constraints = edge_constraints(options, config)

    rows: list[Row] = [
        ("expected", render_value(expected, constraints, config=config)),
        ("actual", render_value(actual, constraints, config=config)),
    ]

    if expected_info.shape != actual_info.shape or expected_info.shape not in _COMPOSITE:
        hints: list[str] = []
        if (
            expected_info.shape != "nullable"
            and actual_info.shape != "nullable"
            and expected_info.type_name != actual_info.type_name
        ):
            hints.append(f"Note: types differ ({expected_info.type_name} ≠ {actual_info.type_name})")
        elif isinstance(expected, str) and isinstance(actual, str):
            hints.append(_string_hint(expected, actual))
        return DiagnosticMessage(
            headline="Not equal:",
            details=tuple(labeled(rows)),
            hints=tuple(hints),
        )

    if expected_info.shape == "sequence":
        expected_size = len(expected)
        actual_size = len(actual)
        if expected_size != actual_size:
            rows.append(("length", f"expected {expected_size}, actual {actual_size}"))

    details = labeled(rows)
    entries = diff_values(expected, actual, config=config)
    if entries:
        details.append("Field differences:")
        details.extend(render_diff_entries(entries, max_lines=config.max_diff_lines))

    return DiagnosticMessage(headline="Not equal:", details=tuple(details))


def explain_not_equal(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    value = render_value(actual, edge_constraints(options, config), config=config)
    return DiagnosticMessage(
        headline="Expected values to be different, but they are equal",
        details=tuple(labeled([("Value", value)])),
    )


def _string_hint(expected: str, actual: str) -> str:
    if expected.casefold() == actual.casefold():
        return "Note: values differ only in case"

    index = next(
        (
            position
            for position, (left, right) in enumerate(zip(expected, actual))
            if left != right
        ),
        min(len(expected), len(actual)),
    )
    return (
        f"Hint: first difference at position {index + 1} "
        f"({_char_at(expected, index)} ≠ {_char_at(actual, index)})"
    )


def _char_at(text: str, index: int) -> str:
    if index >= len(text):
        return "<end>"
    return repr(text[index])
