"""Prefix, suffix and substring explanations for strings."""

from __future__ import annotations

from typing import Any

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.shapes import type_name
from assertpack.messages.base import DiagnosticMessage, Row, labeled
from assertpack.render import render_string
from assertpack.render.blocks import truncate_text
from assertpack.render.values import quote
from assertpack.similar import find_case_mismatch, find_similar_substring

EMPTY_TEXT = "<empty>"
CASE_NOTE = "Note: Case mismatch detected (use ignore_case if intended)"


def explain_start_with(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    if not isinstance(actual, str) or not isinstance(expected, str):
        return _not_a_string(actual, expected)

    prefix = actual[: len(expected)]
    headline = (
        f"Expected string to start with {_display(expected)}, "
        f"but it starts with {_display(prefix)}"
    )
    shown = truncate_text(actual, config.line_width)
    details, offset = _expected_actual_rows(expected, shown)
    if len(actual) >= len(expected) and expected and shown.strip():
        details.append(" " * offset + "^" * _escaped_width(prefix))
        details.append(" " * offset + "(actual prefix)")

    hints: tuple[str, ...] = ()
    if not options.ignore_case and actual.casefold().startswith(expected.casefold()):
        hints = (CASE_NOTE,)
    return DiagnosticMessage(headline=headline, details=tuple(details), hints=hints)


def explain_end_with(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    if not isinstance(actual, str) or not isinstance(expected, str):
        return _not_a_string(actual, expected)

    suffix = actual[len(actual) - len(expected) :] if expected else ""
    headline = (
        f"Expected string to end with {_display(expected)}, "
        f"but it ends with {_display(suffix)}"
    )
    shown = truncate_text(actual, config.line_width, from_end=True)
    details, offset = _expected_actual_rows(expected, shown)
    if len(actual) >= len(expected) and expected and shown.strip():
        width = _escaped_width(suffix)
        padding = " " * (offset + _escaped_width(shown) - width)
        details.append(padding + "^" * width)
        details.append(padding + "(actual suffix)")

    hints: tuple[str, ...] = ()
    if not options.ignore_case and actual.casefold().endswith(expected.casefold()):
        hints = (CASE_NOTE,)
    return DiagnosticMessage(headline=headline, details=tuple(details), hints=hints)


def explain_contain_substring(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    if not isinstance(actual, str) or not isinstance(expected, str):
        return _not_a_string(actual, expected)

    if not options.ignore_case:
        mismatch = find_case_mismatch(actual, expected)
        if mismatch is not None:
            rows: list[Row] = [
                ("Substring", quote(expected)),
                ("Found", f"{quote(mismatch.candidate)} at position {mismatch.position}"),
            ]
            return DiagnosticMessage(
                headline=f"Expected string to contain {quote(expected)}, but found case difference",
                details=tuple(labeled(rows)),
                hints=(CASE_NOTE,),
            )

    rows = [
        ("Substring", _display(expected)),
        ("Actual", render_string(actual, config=config) if actual.strip() else EMPTY_TEXT),
    ]
    hints: list[str] = []
    if len(expected) > config.similarity_query_cap:
        hints.append(
            f"Note: Substring is {len(expected)} characters long (too large for similarity search)"
        )
    else:
        similar = find_similar_substring(actual, expected, config=config)
        if similar is not None:
            hints.append("Similar substring found:")
            hints.append(
                f"  └─ {quote(similar.candidate)} at position {similar.position} - {similar.details}"
            )

    return DiagnosticMessage(
        headline=f"Expected string to contain {_display(expected)}, but it was not found",
        details=tuple(labeled(rows)),
        hints=tuple(hints),
    )


def _expected_actual_rows(expected: str, shown: str) -> tuple[list[str], int]:
    """Expected/Actual rows plus the column where the actual text starts."""
    rows: list[Row] = [("Expected", _display(expected)), ("Actual", _display(shown))]
    lines = labeled(rows)
    offset = len("Expected: ") + (1 if shown.strip() else 0)
    return lines, offset


def _escaped_width(text: str) -> int:
    """Columns ``text`` takes inside its quoted form."""
    return len(quote(text)) - 2


def _display(text: str) -> str:
    if not text.strip():
        return EMPTY_TEXT
    return quote(text)


def _not_a_string(actual: Any, expected: Any) -> DiagnosticMessage:
    rows: list[Row] = [("Expected", type_name(expected)), ("Actual", type_name(actual))]
    return DiagnosticMessage(
        headline="Expected both values to be strings",
        details=tuple(labeled(rows)),
    )
