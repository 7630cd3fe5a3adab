"""Collection containment and duplicate explanations.

Engine selection follows the shape of the missing target: strings go to the
similarity matcher, numbers against numeric collections to the insertion
resolver, and records or mappings to the structural differ for close
matches.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.shapes import classify, is_number, sequence_items, type_name
from assertpack.diff import diff_values, summarize_entry
from assertpack.messages.base import (
    TREE_LAST,
    TREE_MIDDLE,
    TREE_PIPE,
    DiagnosticMessage,
    Row,
    edge_constraints,
    labeled,
    preview_constraints,
)
from assertpack.numeric import describe_position, format_sorted_window, locate_insertion_context
from assertpack.render import render_collection
from assertpack.render.values import format_concise, format_value
from assertpack.similar import SimilarityCandidate, find_similar

_DUPLICATE_INDEX_WINDOW = 4
_CLOSE_MATCH_SHAPES = frozenset({"record", "mapping"})


def explain_contain(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    headline = "Expected collection to contain element:"
    shape = classify(actual)
    if shape != "sequence":
        return DiagnosticMessage(
            headline=f"Expected a collection, but got {type_name(actual)}",
            details=tuple(labeled([("Missing", format_value(expected))], indent="  ")),
        )

    items = sequence_items(actual)

    if isinstance(expected, str) and any(isinstance(item, str) for item in items):
        rows: list[Row] = [
            ("Collection", render_collection(items, preview_constraints(options, config), config=config)),
            ("Missing", format_value(expected)),
        ]
        similar = find_similar(expected, items, config=config, kind_hint="string")
        return DiagnosticMessage(
            headline=headline,
            details=tuple(labeled(rows, indent="  ")),
            hints=tuple(similar_element_lines(similar)),
        )

    if is_number(expected) and items and all(is_number(item) for item in items):
        return _numeric_contain(items, expected, headline=headline, options=options, config=config)

    rows = [
        ("Collection", render_collection(items, preview_constraints(options, config), config=config)),
        ("Missing", format_value(expected)),
    ]
    hints: list[str] = []
    if classify(expected) in _CLOSE_MATCH_SHAPES:
        hints = close_match_lines(expected, items, config=config)
    return DiagnosticMessage(
        headline=headline,
        details=tuple(labeled(rows, indent="  ")),
        hints=tuple(hints),
    )


def _numeric_contain(
    items: list[Any],
    expected: Any,
    *,
    headline: str,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    rows: list[Row] = [
        ("Collection", render_collection(items, edge_constraints(options, config), config=config)),
        ("Missing", format_value(expected)),
    ]
    context = locate_insertion_context(expected, items, window=config.neighbor_window)

    hints: list[str] = []
    if context.unsupported_reason:
        hints.append(f"Note: {context.unsupported_reason}")
    else:
        position = describe_position(context)
        if position:
            hints.append(position)
        if context.total > config.sorted_view_min_size:
            hints.append(f"└─ Sorted view: {format_sorted_window(context)}")

    return DiagnosticMessage(
        headline=headline,
        details=tuple(labeled(rows, indent="  ")),
        hints=tuple(hints),
    )


def similar_element_lines(similar: list[SimilarityCandidate]) -> list[str]:
    if not similar:
        return []
    if len(similar) == 1:
        match = similar[0]
        return [
            f"Found similar: {format_value(match.candidate)} "
            f"(at index {match.position}) - {match.details}"
        ]
    lines = ["Hint: Similar elements found:"]
    for match in similar:
        lines.append(
            f"  └─ {format_value(match.candidate)} (at index {match.position}) - {match.details}"
        )
    return lines


def close_match_lines(target: Any, items: list[Any], *, config: EngineConfig) -> list[str]:
    """Rank same-shaped items by how few differences separate them from ``target``."""
    target_shape = classify(target)
    ranked: list[tuple[int, int, Any, list[str]]] = []
    for index, item in enumerate(items):
        if classify(item) != target_shape:
            continue
        entries = diff_values(target, item, config=config)
        if not entries:
            continue
        ranked.append((len(entries), index, item, [summarize_entry(entry) for entry in entries]))

    if not ranked:
        return []

    ranked.sort(key=lambda match: (match[0], match[1]))
    selected = ranked[: config.close_matches]

    lines = ["Close matches:"]
    for position, (_, _, item, differences) in enumerate(selected):
        branch = TREE_LAST if position == len(selected) - 1 else TREE_MIDDLE
        lines.append(f"{branch} Match #{position + 1}: {format_concise(item, config)}")
        for difference in differences[: config.max_diff_lines]:
            lines.append(f"{TREE_PIPE}   └─ Differs in: {difference}")
        hidden = len(differences) - config.max_diff_lines
        if hidden > 0:
            lines.append(f"{TREE_PIPE}   ... and {hidden} more differences")
    return lines


def explain_not_contain(
    actual: Any,
    expected: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    items = sequence_items(actual) if classify(actual) == "sequence" else []
    indexes = [index for index, item in enumerate(items) if _same(item, expected)]

    rows: list[Row] = [
        ("Collection", render_collection(items, edge_constraints(options, config), config=config)),
    ]
    if indexes:
        rows.append(("Found", f"{format_value(expected)} at index {indexes[0]}"))
    else:
        rows.append(("Found", format_value(expected)))
    if len(indexes) > 1:
        rows.append(
            (
                "Occurrences",
                f"{len(indexes)} at indexes {format_index_window(indexes, _DUPLICATE_INDEX_WINDOW)}",
            )
        )
    return DiagnosticMessage(
        headline="Expected collection to NOT contain element:",
        details=tuple(labeled(rows)),
    )


def explain_no_duplicates(
    actual: Any,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    items = sequence_items(actual) if classify(actual) == "sequence" else []
    groups = find_duplicates(items)

    if len(groups) == 1:
        headline = "Expected no duplicates, but found 1 duplicate value:"
    else:
        headline = f"Expected no duplicates, but found {len(groups)} duplicate values:"

    details = [
        f"└─ {format_concise(value, config)} appears {len(indexes)} times at indexes "
        f"{format_index_window(indexes, _DUPLICATE_INDEX_WINDOW)}"
        for value, indexes in groups
    ]
    return DiagnosticMessage(headline=headline, details=tuple(details))


def find_duplicates(items: list[Any]) -> list[tuple[Any, list[int]]]:
    """Group equal items, in order of first occurrence.

    Hashable items are grouped by ``(type, value)`` so that ``1`` and
    ``True`` stay apart; the rest fall back to pairwise comparison.
    """
    hashed: dict[Any, list[int]] = {}
    unhashable: list[tuple[Any, list[int]]] = []

    for index, item in enumerate(items):
        if isinstance(item, Hashable):
            try:
                key = (type(item), item)
                hashed.setdefault(key, []).append(index)
                continue
            except TypeError:
                pass
        for value, indexes in unhashable:
            if _same(value, item):
                indexes.append(index)
                break
        else:
            unhashable.append((item, [index]))

    groups = [(key[1], indexes) for key, indexes in hashed.items() if len(indexes) > 1]
    groups.extend((value, indexes) for value, indexes in unhashable if len(indexes) > 1)
    groups.sort(key=lambda group: group[1][0])
    return groups


def format_index_window(indexes: list[int], window: int) -> str:
    if len(indexes) <= window:
        return "[" + ", ".join(str(index) for index in indexes) + "]"
    return "[" + ", ".join(str(index) for index in indexes[:window]) + ", ...]"


def _same(left: Any, right: Any) -> bool:
    if type(left) is not type(right):
        return False
    try:
        return bool(left == right)
    except Exception:
        return False
