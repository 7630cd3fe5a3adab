"""Shape classification: the single place that inspects value types.

Every other component dispatches on the ``Shape`` tag returned here
instead of running its own ``isinstance`` chains.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, is_dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
import math
from types import FunctionType, MethodType, ModuleType
from typing import Any
from uuid import UUID

from assertpack.core.canonical import canonical_sort
from assertpack.core.types import Shape

_SCALAR_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    Decimal,
    Fraction,
    datetime,
    date,
    time,
    timedelta,
    Enum,
    UUID,
    PurePath,
)

_SEQUENCE_TYPES: tuple[type, ...] = (list, tuple, range, deque, set, frozenset)


@dataclass(frozen=True, slots=True)
class ValueInfo:
    """A value tagged with its shape, computed once per diagnostic call."""

    raw: Any
    shape: Shape
    type_name: str
    unordered: bool = False


def inspect_value(raw: Any) -> ValueInfo:
    shape = classify(raw)
    return ValueInfo(
        raw=raw,
        shape=shape,
        type_name=type_name(raw),
        unordered=shape == "sequence" and isinstance(raw, (set, frozenset)),
    )


def classify(value: Any) -> Shape:
    if value is None:
        return "nullable"
    if isinstance(value, _SCALAR_TYPES):
        return "scalar"
    if isinstance(value, Mapping):
        return "mapping"
    if _is_named_tuple(value) or (is_dataclass(value) and not isinstance(value, type)):
        return "record"
    if isinstance(value, _SEQUENCE_TYPES) or isinstance(value, Sequence):
        return "sequence"
    if _has_public_attributes(value):
        return "record"
    return "scalar"


def type_name(value: Any) -> str:
    if value is None:
        return "NoneType"
    return type(value).__name__


def is_number(value: Any) -> bool:
    """Real numbers only; ``bool`` is deliberately excluded."""
    return isinstance(value, (int, float, Decimal, Fraction)) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def sequence_items(value: Any) -> list[Any]:
    """Items of a sequence-shaped value; sets come back canonically sorted."""
    if isinstance(value, (set, frozenset)):
        return canonical_sort(value)
    return list(value)


def record_fields(value: Any) -> list[tuple[str, Any]]:
    """Public fields of a record-shaped value, in declaration order."""
    if _is_named_tuple(value):
        return list(zip(type(value)._fields, value))
    if is_dataclass(value) and not isinstance(value, type):
        return [(item.name, getattr(value, item.name)) for item in fields(value)]
    return [
        (name, attribute)
        for name, attribute in vars(value).items()
        if not name.startswith("_")
    ]


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _has_public_attributes(value: Any) -> bool:
    if isinstance(value, (type, ModuleType, FunctionType, MethodType)):
        return False
    try:
        attributes = vars(value)
    except TypeError:
        return False
    return any(not name.startswith("_") for name in attributes)
