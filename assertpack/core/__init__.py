"""Core models and deterministic primitives for AssertPack."""

from assertpack.core.canonical import canonical_keys, canonical_sort, safe_repr
from assertpack.core.config import DEFAULT_CONFIG, DEFAULT_OPTIONS, EngineConfig, FormatOptions
from assertpack.core.exceptions import AssertPackError, EngineConfigError, PayloadError
from assertpack.core.shapes import ValueInfo, classify, inspect_value
from assertpack.core.types import SHAPES, Shape

__all__ = [
    "AssertPackError",
    "EngineConfigError",
    "PayloadError",
    "EngineConfig",
    "FormatOptions",
    "DEFAULT_CONFIG",
    "DEFAULT_OPTIONS",
    "Shape",
    "SHAPES",
    "ValueInfo",
    "classify",
    "inspect_value",
    "canonical_keys",
    "canonical_sort",
    "safe_repr",
]
