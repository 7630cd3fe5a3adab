"""Numeric context resolution for AssertPack."""

from assertpack.numeric.models import InsertionContext
from assertpack.numeric.resolver import (
    describe_position,
    format_sorted_window,
    locate_insertion_context,
)

__all__ = [
    "InsertionContext",
    "locate_insertion_context",
    "format_sorted_window",
    "describe_position",
]
