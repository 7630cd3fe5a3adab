"""Type definitions for AssertPack core models."""

from typing import Literal

Shape = Literal[
    "scalar",
    "sequence",
    "mapping",
    "record",
    "nullable",
]

SHAPES: tuple[str, ...] = (
    "scalar",
    "sequence",
    "mapping",
    "record",
    "nullable",
)

SimilarityKind = Literal[
    "exact_case",
    "case_only",
    "extra_chars",
    "missing_chars",
    "typo",
    "numeric_proximity",
]

DiffKind = Literal[
    "changed",
    "missing_actual",
    "missing_expected",
    "type_mismatch",
    "too_deep",
]

ComparisonOperator = Literal[
    "greater",
    "less",
    "greater_or_equal",
    "less_or_equal",
]

COMPARISON_OPERATORS: tuple[str, ...] = (
    "greater",
    "less",
    "greater_or_equal",
    "less_or_equal",
)
