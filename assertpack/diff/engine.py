"""Depth-bounded recursive differ over shaped values."""

from __future__ import annotations

from typing import Any

from assertpack.core.canonical import canonical_sort
from assertpack.core.config import DEFAULT_CONFIG, EngineConfig
from assertpack.core.shapes import classify, is_nan, record_fields, sequence_items
from assertpack.diff.models import DiffEntry
from assertpack.render.values import format_concise, format_value

_MISSING = object()

MISSING_TEXT = "<missing>"
TOO_DEEP_TEXT = "<structure too deep>"


def diff_values(
    expected: Any,
    actual: Any,
    *,
    config: EngineConfig | None = None,
) -> list[DiffEntry]:
    """Diff two values depth-first, pre-order.

    Sequence indices ascend, mapping keys follow canonical order and record
    fields follow declaration order. Sequences compare their overlapping
    indices. A nested sequence whose length differs also gets an entry at its
    own path, after its elements; a top-level length difference does not.
    """
    out: list[DiffEntry] = []
    _collect(
        expected,
        actual,
        path=(),
        location="",
        depth=0,
        out=out,
        config=config or DEFAULT_CONFIG,
    )
    return out


def _collect(
    expected: Any,
    actual: Any,
    *,
    path: tuple[Any, ...],
    location: str,
    depth: int,
    out: list[DiffEntry],
    config: EngineConfig,
) -> None:
    if expected is _MISSING or actual is _MISSING:
        out.append(
            DiffEntry(
                path=path,
                location=location,
                expected_repr=MISSING_TEXT if expected is _MISSING else format_concise(expected, config),
                actual_repr=MISSING_TEXT if actual is _MISSING else format_concise(actual, config),
                kind="missing_expected" if expected is _MISSING else "missing_actual",
            )
        )
        return

    if expected is actual:
        return

    expected_shape = classify(expected)
    actual_shape = classify(actual)

    if expected_shape != actual_shape:
        kind = "changed" if "nullable" in (expected_shape, actual_shape) else "type_mismatch"
        out.append(_entry(expected, actual, path, location, config, kind))
        return

    if expected_shape == "nullable":
        return

    if expected_shape == "scalar":
        if type(expected) is not type(actual):
            out.append(_entry(expected, actual, path, location, config, "type_mismatch"))
        elif not _scalars_equal(expected, actual):
            out.append(_entry(expected, actual, path, location, config, "changed"))
        return

    if depth >= config.max_diff_depth:
        out.append(
            DiffEntry(
                path=path,
                location=location,
                expected_repr=TOO_DEEP_TEXT,
                actual_repr=TOO_DEEP_TEXT,
                kind="too_deep",
            )
        )
        return

    if expected_shape == "mapping":
        keys = canonical_sort(dict.fromkeys([*expected.keys(), *actual.keys()]))
        for key in keys:
            _collect(
                expected[key] if key in expected else _MISSING,
                actual[key] if key in actual else _MISSING,
                path=(*path, key),
                location=f"{location}[{format_value(key)}]",
                depth=depth + 1,
                out=out,
                config=config,
            )
        return

    if expected_shape == "record":
        if type(expected) is not type(actual):
            out.append(_entry(expected, actual, path, location, config, "type_mismatch"))
            return
        expected_fields = dict(record_fields(expected))
        actual_fields = dict(record_fields(actual))
        for name in dict.fromkeys([*expected_fields, *actual_fields]):
            _collect(
                expected_fields.get(name, _MISSING),
                actual_fields.get(name, _MISSING),
                path=(*path, name),
                location=f"{location}.{name}" if location else name,
                depth=depth + 1,
                out=out,
                config=config,
            )
        return

    if not _same_sequence_kind(expected, actual):
        out.append(_entry(expected, actual, path, location, config, "type_mismatch"))
        return

    expected_items = sequence_items(expected)
    actual_items = sequence_items(actual)
    for index in range(min(len(expected_items), len(actual_items))):
        _collect(
            expected_items[index],
            actual_items[index],
            path=(*path, index),
            location=f"{location}[{index}]",
            depth=depth + 1,
            out=out,
            config=config,
        )
    if path and len(expected_items) != len(actual_items):
        out.append(_entry(expected, actual, path, location, config, "changed"))


def _entry(
    expected: Any,
    actual: Any,
    path: tuple[Any, ...],
    location: str,
    config: EngineConfig,
    kind: str,
) -> DiffEntry:
    if kind == "type_mismatch" and format_concise(expected, config) == format_concise(actual, config):
        expected_repr = f"{format_concise(expected, config)} ({type(expected).__name__})"
        actual_repr = f"{format_concise(actual, config)} ({type(actual).__name__})"
    else:
        expected_repr = format_concise(expected, config)
        actual_repr = format_concise(actual, config)
    return DiffEntry(
        path=path,
        location=location,
        expected_repr=expected_repr,
        actual_repr=actual_repr,
        kind=kind,
    )


def _scalars_equal(expected: Any, actual: Any) -> bool:
    if is_nan(expected) and is_nan(actual):
        return True
    try:
        return bool(expected == actual)
    except Exception:
        return format_value(expected) == format_value(actual)


def _same_sequence_kind(expected: Any, actual: Any) -> bool:
    if type(expected) is type(actual):
        return True
    set_types = (set, frozenset)
    return isinstance(expected, set_types) and isinstance(actual, set_types)
