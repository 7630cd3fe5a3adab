"""Deterministic ordering helpers for AssertPack."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def safe_repr(value: Any) -> str:
    """Return ``repr(value)`` or a placeholder when ``__repr__`` itself fails."""
    try:
        return repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


def stable_sort_key(value: Any) -> tuple[str, str]:
    return (type(value).__name__, safe_repr(value))


def canonical_sort(items: Iterable[Any]) -> list[Any]:
    """Sort items naturally when mutually orderable, else by type name and repr."""
    materialized = list(items)
    try:
        return sorted(materialized)
    except TypeError:
        return sorted(materialized, key=stable_sort_key)


def canonical_keys(mapping: Mapping[Any, Any]) -> list[Any]:
    return canonical_sort(mapping.keys())


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")
