"""Per-family diagnostic message assembly for AssertPack."""

from assertpack.messages.base import DiagnosticMessage, fallback_message
from assertpack.messages.containment import (
    explain_contain,
    explain_no_duplicates,
    explain_not_contain,
)
from assertpack.messages.equality import explain_equal, explain_not_equal
from assertpack.messages.errors import (
    explain_error,
    explain_error_as,
    explain_error_is,
    explain_no_error,
    explain_not_raises,
    explain_raises,
)
from assertpack.messages.mappings import (
    explain_contain_key,
    explain_contain_value,
    explain_not_contain_key,
    explain_not_contain_value,
)
from assertpack.messages.ordering import (
    explain_compare,
    explain_in_range,
    explain_sorted,
    explain_within,
)
from assertpack.messages.state import (
    explain_any_match,
    explain_empty,
    explain_false,
    explain_length,
    explain_none,
    explain_not_empty,
    explain_not_none,
    explain_of_type,
    explain_one_of,
    explain_true,
)
from assertpack.messages.text import (
    explain_contain_substring,
    explain_end_with,
    explain_start_with,
)
from assertpack.messages.timing import explain_same_time

__all__ = [
    "DiagnosticMessage",
    "fallback_message",
    "explain_equal",
    "explain_not_equal",
    "explain_true",
    "explain_false",
    "explain_none",
    "explain_not_none",
    "explain_empty",
    "explain_not_empty",
    "explain_contain",
    "explain_not_contain",
    "explain_no_duplicates",
    "explain_contain_key",
    "explain_not_contain_key",
    "explain_contain_value",
    "explain_not_contain_value",
    "explain_length",
    "explain_of_type",
    "explain_one_of",
    "explain_any_match",
    "explain_sorted",
    "explain_in_range",
    "explain_compare",
    "explain_within",
    "explain_raises",
    "explain_not_raises",
    "explain_error",
    "explain_no_error",
    "explain_error_is",
    "explain_error_as",
    "explain_start_with",
    "explain_end_with",
    "explain_contain_substring",
    "explain_same_time",
]
