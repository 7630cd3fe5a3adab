"""Stable public API surface for AssertKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from assertpack.core.config import DEFAULT_CONFIG, EngineConfig, FormatOptions
from assertpack.core.exceptions import AssertPackError, EngineConfigError, PayloadError
from assertpack.diff import DiffEntry, diff_values
from assertpack.explainer import UNSET, Explainer
from assertpack.messages import DiagnosticMessage
from assertpack.numeric import InsertionContext, locate_insertion_context
from assertpack.render import FormattedBlock, RenderConstraints, render_value
from assertpack.similar import (
    SimilarityCandidate,
    damerau_levenshtein_distance,
    levenshtein_distance,
)
from assertpack.similar import find_similar as _find_similar

__version__ = "0.1.0"


def explain(
    kind: str,
    actual: Any,
    expected: Any = UNSET,
    *,
    options: FormatOptions | None = None,
    config: EngineConfig | None = None,
) -> str:
    """Return the diagnostic message for a failed assertion of ``kind``."""
    return Explainer(config or DEFAULT_CONFIG).explain(kind, actual, expected, options=options)


def diff(
    expected: Any,
    actual: Any,
    *,
    config: EngineConfig | None = None,
) -> list[DiffEntry]:
    """Path-qualified differences between two values; empty when they match."""
    return diff_values(expected, actual, config=config or DEFAULT_CONFIG)


def find_similar(
    query: Any,
    candidates: Iterable[Any] | Mapping[Any, Any],
    *,
    config: EngineConfig | None = None,
) -> list[SimilarityCandidate]:
    """Rank near misses of ``query`` among ``candidates``, best first."""
    return _find_similar(query, candidates, config=config or DEFAULT_CONFIG)


def locate_insertion(
    query: Any,
    collection: Iterable[Any],
    *,
    config: EngineConfig | None = None,
) -> InsertionContext:
    """Neighbours of ``query`` in the sorted view of ``collection``."""
    resolved = config or DEFAULT_CONFIG
    return locate_insertion_context(query, collection, window=resolved.neighbor_window)


def render(
    value: Any,
    *,
    max_items: int | None = None,
    config: EngineConfig | None = None,
) -> FormattedBlock:
    """Size-aware text block for ``value`` with its shown and total counts."""
    constraints = RenderConstraints(max_items=max_items) if max_items is not None else None
    return render_value(value, constraints, config=config or DEFAULT_CONFIG)


def distance(left: str, right: str, *, transpositions: bool = False) -> int:
    """Edit distance between two strings, optionally counting adjacent swaps as one edit."""
    if transpositions:
        return damerau_levenshtein_distance(left, right)
    return levenshtein_distance(left, right)


__all__ = [
    "__version__",
    "AssertPackError",
    "EngineConfigError",
    "PayloadError",
    "Explainer",
    "EngineConfig",
    "FormatOptions",
    "DiagnosticMessage",
    "DiffEntry",
    "SimilarityCandidate",
    "InsertionContext",
    "FormattedBlock",
    "RenderConstraints",
    "explain",
    "diff",
    "find_similar",
    "locate_insertion",
    "render",
    "distance",
]
