"""Diagnostic message model and shared layout helpers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from assertpack.core.canonical import safe_repr
from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.render.models import FormattedBlock, RenderConstraints

TREE_LAST = "└─"
TREE_MIDDLE = "├─"
TREE_PIPE = "│"


@dataclass(frozen=True, slots=True)
class DiagnosticMessage:
    """Headline, details and optional hints, rendered in that fixed order.

    A caller-supplied ``custom_message`` is emitted verbatim as the first
    line. An empty ``hints`` tuple produces no hint section at all.
    """

    headline: str
    details: tuple[str, ...] = ()
    hints: tuple[str, ...] = ()
    custom_message: str | None = None

    def with_custom_message(self, message: str | None) -> "DiagnosticMessage":
        if not message:
            return self
        return replace(self, custom_message=message)

    def render(self) -> str:
        lines: list[str] = []
        if self.custom_message:
            lines.append(self.custom_message)
        lines.append(self.headline)
        lines.extend(self.details)
        if self.hints:
            lines.append("")
            lines.extend(self.hints)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "custom_message": self.custom_message,
            "headline": self.headline,
            "details": list(self.details),
            "hints": list(self.hints),
        }


Row = tuple[str, str | FormattedBlock]


def labeled(rows: list[Row], *, indent: str = "") -> list[str]:
    """Align ``label : value`` rows on the colon.

    Multi-line blocks keep their first line on the label row and the rest
    below it, unindented.
    """
    if not rows:
        return []
    width = max(len(label) for label, _ in rows)
    lines: list[str] = []
    for label, value in rows:
        prefix = f"{indent}{label.ljust(width)}: "
        if isinstance(value, FormattedBlock):
            lines.append(prefix + value.lines[0])
            lines.extend(value.lines[1:])
        else:
            lines.append(prefix + value)
    return lines


def tree(items: list[str], *, indent: str = "") -> list[str]:
    """Prefix each item with a tree branch, closing on the last one."""
    return [
        f"{indent}{TREE_LAST if position == len(items) - 1 else TREE_MIDDLE} {item}"
        for position, item in enumerate(items)
    ]


def preview_constraints(options: FormatOptions, config: EngineConfig) -> RenderConstraints:
    return RenderConstraints(max_items=options.max_items or config.inline_items)


def edge_constraints(options: FormatOptions, config: EngineConfig) -> RenderConstraints:
    """First and last items of long collections, ``edge_items`` from each end."""
    limit = options.max_items or config.edge_items * 2
    head = max(1, limit // 2)
    return RenderConstraints(max_items=limit, head_items=head, tail_items=limit - head)


def plural(count: int, singular: str, plural_form: str | None = None) -> str:
    word = singular if count == 1 else (plural_form or f"{singular}s")
    return f"{count} {word}"


def fallback_message(headline: str, values: tuple[Any, ...]) -> DiagnosticMessage:
    """Raw dump used when a family fails to assemble its own message."""
    labels = ("actual", "expected")
    rows: list[Row] = []
    for position, value in enumerate(values):
        label = labels[position] if position < len(labels) else f"argument {position + 1}"
        rows.append((label, safe_repr(value)))
    return DiagnosticMessage(headline=headline, details=tuple(labeled(rows)))
