"""Mapping key and value membership explanations."""

from __future__ import annotations

from typing import Any

from assertpack.core.canonical import canonical_keys
from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.shapes import classify, is_number, type_name
from assertpack.messages.base import (
    DiagnosticMessage,
    Row,
    labeled,
    plural,
    preview_constraints,
    tree,
)
from assertpack.messages.containment import close_match_lines
from assertpack.render import render_collection
from assertpack.render.values import format_concise, format_value
from assertpack.similar import SimilarityCandidate, find_similar

_FOUND_AT_LIMIT = 3


def explain_contain_key(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    mapping = _as_mapping(actual)
    keys = canonical_keys(mapping)
    target = format_value(expected)

    rows: list[Row] = [
        ("Available keys", render_collection(keys, preview_constraints(options, config), config=config)),
        ("Missing", target),
    ]
    similar: list[SimilarityCandidate] = []
    if isinstance(expected, str) or is_number(expected):
        similar = find_similar(expected, keys, config=config)

    return DiagnosticMessage(
        headline=f"Expected map to contain key {target}, but key was not found",
        details=tuple(labeled(rows)),
        hints=tuple(_similar_lines("key", similar, with_key=False)),
    )


def explain_contain_value(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    mapping = _as_mapping(actual)
    keys = canonical_keys(mapping)
    values = [mapping[key] for key in keys]

    if classify(expected) in ("record", "mapping"):
        return _composite_value_missing(values, expected, options=options, config=config)

    target = format_value(expected)
    rows: list[Row] = [
        ("Available values", render_collection(values, preview_constraints(options, config), config=config)),
        ("Missing", target),
    ]
    similar: list[SimilarityCandidate] = []
    if isinstance(expected, str) or is_number(expected):
        similar = find_similar(expected, {key: mapping[key] for key in keys}, config=config)

    return DiagnosticMessage(
        headline=f"Expected map to contain value {target}, but value was not found",
        details=tuple(labeled(rows)),
        hints=tuple(_similar_lines("value", similar, with_key=True)),
    )


def _composite_value_missing(
    values: list[Any],
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    rows: list[Row] = [
        ("Collection", f"{len(values)} values of type {type_name(expected)}"),
        ("Missing", format_concise(expected, config)),
    ]
    details = labeled(rows)

    shown = values[: options.max_items or config.inline_items]
    if shown:
        details.append("")
        details.append("Available values:")
        details.extend(tree([format_concise(value, config) for value in shown]))
        if len(shown) < len(values):
            details.append(f"(showing {len(shown)} of {len(values)})")

    return DiagnosticMessage(
        headline="Expected map to contain value, but it was not found:",
        details=tuple(details),
        hints=tuple(close_match_lines(expected, values, config=config)),
    )


def explain_not_contain_key(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    mapping = _as_mapping(actual)
    rows: list[Row] = [
        ("Map Type", type_name(actual)),
        ("Map Size", plural(len(mapping), "entry", "entries")),
        ("Found Key", format_value(expected)),
    ]
    if _has_key(mapping, expected):
        rows.append(("Associated Value", format_concise(mapping[expected], config)))
    return DiagnosticMessage(
        headline="Expected map to NOT contain key, but key was found:",
        details=tuple(labeled(rows)),
    )


def explain_not_contain_value(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    mapping = _as_mapping(actual)
    found_keys = [
        format_value(key)
        for key in canonical_keys(mapping)
        if type(mapping[key]) is type(expected) and _equal(mapping[key], expected)
    ]

    rows: list[Row] = [
        ("Map Type", type_name(actual)),
        ("Map Size", plural(len(mapping), "entry", "entries")),
        ("Found Value", format_concise(expected, config)),
    ]
    if len(found_keys) == 1:
        rows.append(("Found At", f"key {found_keys[0]}"))
    elif 1 < len(found_keys) <= _FOUND_AT_LIMIT:
        rows.append(("Found At", f"keys {', '.join(found_keys)}"))
    elif len(found_keys) > _FOUND_AT_LIMIT:
        rows.append(("Found At", f"{len(found_keys)} keys ({', '.join(found_keys[:2])}, ...)"))

    return DiagnosticMessage(
        headline="Expected map to NOT contain value, but it was found:",
        details=tuple(labeled(rows)),
    )


def _similar_lines(noun: str, similar: list[SimilarityCandidate], *, with_key: bool) -> list[str]:
    if not similar:
        return []
    header = f"Similar {noun} found:" if len(similar) == 1 else f"Similar {noun}s found:"
    lines = [header]
    for match in similar:
        location = f" (at key {format_value(match.position)})" if with_key else ""
        lines.append(f"  └─ {format_value(match.candidate)}{location} - {match.details}")
    return lines


def _as_mapping(actual: Any) -> Any:
    if classify(actual) == "mapping":
        return actual
    return {}


def _has_key(mapping: Any, key: Any) -> bool:
    try:
        return key in mapping
    except TypeError:
        return False


def _equal(left: Any, right: Any) -> bool:
    try:
        return bool(left == right)
    except Exception:
        return False
