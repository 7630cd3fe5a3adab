"""Text rendering for structural diff entries."""

from __future__ import annotations

from assertpack.diff.models import DiffEntry


def render_diff_line(entry: DiffEntry) -> str:
    return f"{entry.display_location}: {entry.expected_repr} ≠ {entry.actual_repr}"


def render_diff_entries(
    entries: list[DiffEntry],
    *,
    max_lines: int = 8,
    indent: str = "  ",
) -> list[str]:
    if not entries:
        return []

    lines = [f"{indent}└─ {render_diff_line(entry)}" for entry in entries[:max_lines]]
    hidden = len(entries) - max_lines
    if hidden > 0:
        lines.append(f"{indent}... and {hidden} more differences")
    return lines


def summarize_entry(entry: DiffEntry) -> str:
    """Compact ``path (expected ≠ actual)`` form used in close-match listings."""
    return f"{entry.display_location} ({entry.expected_repr} ≠ {entry.actual_repr})"
