"""Binary-search insertion context for values missing from a collection."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Any

from assertpack.core.shapes import is_nan
from assertpack.numeric.models import InsertionContext
from assertpack.render.values import format_value


def locate_insertion_context(
    query: Any,
    collection: Iterable[Any],
    *,
    window: int = 2,
) -> InsertionContext:
    """Find the neighbours of ``query`` in the sorted view of ``collection``.

    The collection is copied before sorting and never mutated. NaN values
    and unorderable mixes come back with ``unsupported_reason`` set.
    """
    items = list(collection)
    total = len(items)

    if is_nan(query):
        return InsertionContext(
            query=query,
            total=total,
            unsupported_reason="NaN values are not supported",
        )
    if not items:
        return InsertionContext(query=query, total=0)
    if any(is_nan(item) for item in items):
        return InsertionContext(
            query=query,
            total=total,
            unsupported_reason="collection contains NaN values",
        )

    try:
        ordered = sorted(items)
        index = bisect_left(ordered, query)
    except TypeError:
        return InsertionContext(
            query=query,
            total=total,
            unsupported_reason="collection values are not mutually orderable",
        )

    found = index < total and ordered[index] == query
    start = max(0, index - window)
    end = min(total, index + window)

    return InsertionContext(
        query=query,
        total=total,
        insert_index=index,
        below=ordered[index - 1] if index > 0 and not found else None,
        above=ordered[index] if index < total and not found else None,
        found=found,
        sorted_window=tuple(ordered[start:end]),
        window_start=start,
        window_end=end,
    )


def format_sorted_window(context: InsertionContext) -> str:
    """``[..., 40, 50, 60, 70, ...]`` with ellipses where the view is cut."""
    parts = [format_value(item) for item in context.sorted_window]
    if context.window_start > 0:
        parts.insert(0, "...")
    if context.window_end < context.total:
        parts.append("...")
    return "[" + ", ".join(parts) + "]"


def describe_position(context: InsertionContext) -> str | None:
    query = format_value(context.query)
    if context.below is not None and context.above is not None:
        return (
            f"Element {query} would fit between {format_value(context.below)} "
            f"and {format_value(context.above)} in sorted order"
        )
    if context.below is not None:
        return f"Element {query} would be after {format_value(context.below)} in sorted order"
    if context.above is not None:
        return f"Element {query} would be before {format_value(context.above)} in sorted order"
    return None
