"""Truth, nullness, emptiness, length, type and option-membership explanations."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.shapes import classify, is_number, sequence_items, type_name
from assertpack.messages.base import (
    DiagnosticMessage,
    Row,
    labeled,
    plural,
    preview_constraints,
)
from assertpack.render import RenderConstraints, render_collection, render_string, render_value
from assertpack.render.values import format_signed, format_value, quote
from assertpack.similar import find_similar

_ONE_OF_PREVIEW = 4
_EMPTY_CONTENT_LIMIT = 50
_EMPTY_STRING_BLOCK_LIMIT = 180


def explain_true(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    return _truth_message(actual, True)


def explain_false(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    return _truth_message(actual, False)


def _truth_message(actual: Any, wanted: bool) -> DiagnosticMessage:
    got = "false" if wanted else "true"
    headline = f"Expected {'true' if wanted else 'false'}, got {got}"
    if isinstance(actual, bool):
        return DiagnosticMessage(headline=headline)
    rows: list[Row] = [("Value", format_value(actual)), ("Type", type_name(actual))]
    return DiagnosticMessage(headline=headline, details=tuple(labeled(rows)))


def explain_none(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    rows: list[Row] = [
        ("Value", render_value(actual, preview_constraints(options, config), config=config)),
        ("Type", type_name(actual)),
    ]
    return DiagnosticMessage(
        headline="Expected None, but was not",
        details=tuple(labeled(rows)),
    )


def explain_not_none(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    return DiagnosticMessage(headline="Expected not None, but was None")


def explain_empty(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    headline = "Expected value to be empty, but it was not:"

    if actual is None:
        return DiagnosticMessage(
            headline=headline,
            details=tuple(labeled([("Type", "NoneType"), ("Value", "None")], indent="  ")),
        )

    if isinstance(actual, str):
        if len(actual) > _EMPTY_STRING_BLOCK_LIMIT:
            return DiagnosticMessage(headline=headline, details=render_string(actual, config=config).lines)
        rows: list[Row] = [("Type", "str"), ("Length", plural(len(actual), "character"))]
        if actual:
            if len(actual) <= _EMPTY_CONTENT_LIMIT:
                rows.append(("Content", quote(actual)))
            else:
                rows.append(("Content", quote(actual[: _EMPTY_CONTENT_LIMIT - 3]) + "... (truncated)"))
        return DiagnosticMessage(headline=headline, details=tuple(labeled(rows, indent="  ")))

    shape = classify(actual)
    if shape == "mapping":
        rows = [("Type", type_name(actual)), ("Length", plural(len(actual), "entry", "entries"))]
        if len(actual):
            constraints = RenderConstraints(max_items=options.max_items or config.preview_items)
            rows.append(("Content", render_value(actual, constraints, config=config)))
        return DiagnosticMessage(headline=headline, details=tuple(labeled(rows, indent="  ")))

    if shape == "sequence" or (isinstance(actual, Sized) and shape != "record"):
        size = len(actual)
        rows = [("Type", type_name(actual)), ("Length", plural(size, "element"))]
        if size and shape == "sequence":
            constraints = RenderConstraints(
                max_items=options.max_items or config.inline_items,
                head_items=config.preview_items,
            )
            rows.append(("Content", render_value(actual, constraints, config=config)))
        return DiagnosticMessage(headline=headline, details=tuple(labeled(rows, indent="  ")))

    rows = [("Type", type_name(actual)), ("Value", format_value(actual))]
    return DiagnosticMessage(headline=headline, details=tuple(labeled(rows, indent="  ")))


def explain_not_empty(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    headline = "Expected value to be not empty, but it was empty:"
    if actual is None:
        rows: list[Row] = [("Type", "NoneType"), ("Value", "None")]
    elif isinstance(actual, str):
        rows = [("Type", "str"), ("Length", plural(len(actual), "character"))]
    elif classify(actual) == "mapping":
        rows = [("Type", type_name(actual)), ("Length", plural(len(actual), "entry", "entries"))]
    elif isinstance(actual, Sized):
        rows = [("Type", type_name(actual)), ("Length", plural(len(actual), "element"))]
    else:
        rows = [("Type", type_name(actual)), ("Value", format_value(actual))]
    return DiagnosticMessage(headline=headline, details=tuple(labeled(rows, indent="  ")))


def explain_length(
    actual: Any,
    expected: int,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    if not isinstance(actual, Sized):
        return DiagnosticMessage(
            headline=f"Expected a value with a length, but got {type_name(actual)}",
            details=tuple(labeled([("Value", format_value(actual))])),
        )

    actual_length = len(actual)
    difference = actual_length - expected
    if difference > 0:
        summary = f"{format_signed(difference)} ({plural(difference, 'element')} extra)"
    elif difference < 0:
        summary = f"{difference} ({plural(-difference, 'element')} missing)"
    else:
        summary = "0 (lengths are equal)"

    rows: list[Row] = [
        ("Type", type_name(actual)),
        ("Expected Length", str(expected)),
        ("Actual Length", str(actual_length)),
        ("Difference", summary),
    ]
    return DiagnosticMessage(
        headline="Expected collection to have specific length:",
        details=tuple(labeled(rows)),
    )


def explain_of_type(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    expected_type = expected if isinstance(expected, type) else type(expected)
    actual_type = type(actual)

    rows: list[Row] = [
        ("Expected Type", _qualified(expected_type)),
        ("Actual Type", _qualified(actual_type)),
        ("Difference", "Different concrete types"),
    ]
    hints: list[str] = []
    if expected_type.__name__ == actual_type.__name__ and expected_type is not actual_type:
        hints.append("Note: both types share a name but come from different modules")
    elif issubclass(actual_type, expected_type):
        hints.append(f"Note: {actual_type.__name__} is a subclass of {expected_type.__name__}")
    return DiagnosticMessage(
        headline="Expected value to be of specific type:",
        details=tuple(labeled(rows)),
        hints=tuple(hints),
    )


def explain_one_of(
    actual: Any,
    choices: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    items = sequence_items(choices) if classify(choices) == "sequence" else [choices]
    if not items:
        return DiagnosticMessage(headline="Options list cannot be empty for a one-of check")

    constraints = RenderConstraints(max_items=options.max_items or _ONE_OF_PREVIEW)
    rows: list[Row] = [
        ("Value", format_value(actual)),
        ("Options", render_collection(items, constraints, config=config)),
        ("Count", f"0 of {len(items)} options matched"),
    ]

    hints: list[str] = []
    if isinstance(actual, str) or is_number(actual):
        similar = find_similar(actual, items, config=config)
        if similar:
            best = similar[0]
            hints.append(f"Closest option: {format_value(best.candidate)} - {best.details}")

    return DiagnosticMessage(
        headline="Expected value to be one of the allowed options:",
        details=tuple(labeled(rows)),
        hints=tuple(hints),
    )


def explain_any_match(
    actual: Any,
    predicate: Any = None,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    items = sequence_items(actual) if classify(actual) == "sequence" else []
    rows: list[Row] = [
        ("Collection", render_collection(items, preview_constraints(options, config), config=config)),
        ("Checked", plural(len(items), "item")),
    ]
    name = getattr(predicate, "__name__", None)
    if name and name != "<lambda>":
        rows.append(("Predicate", name))
    return DiagnosticMessage(
        headline="Predicate does not match any item in the collection",
        details=tuple(labeled(rows)),
    )


def _qualified(kind: type) -> str:
    module = kind.__module__
    if module == "builtins":
        return kind.__qualname__
    return f"{module}.{kind.__qualname__}"
