"""Structural diff subsystem for AssertPack."""

from assertpack.diff.engine import MISSING_TEXT, TOO_DEEP_TEXT, diff_values
from assertpack.diff.formatting import render_diff_entries, render_diff_line, summarize_entry
from assertpack.diff.models import DiffEntry

__all__ = [
    "DiffEntry",
    "diff_values",
    "render_diff_entries",
    "render_diff_line",
    "summarize_entry",
    "MISSING_TEXT",
    "TOO_DEEP_TEXT",
]
