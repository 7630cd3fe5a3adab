"""Bounded, count-preserving rendering of strings and collections."""

from __future__ import annotations

from typing import Any

from assertpack.core.canonical import canonical_keys, normalize_newlines
from assertpack.core.config import DEFAULT_CONFIG, EngineConfig
from assertpack.core.shapes import inspect_value, record_fields, sequence_items
from assertpack.render.models import FormattedBlock, RenderConstraints
from assertpack.render.values import format_scalar, format_value, quote

_NO_CONSTRAINTS = RenderConstraints()


def render_value(
    value: Any,
    constraints: RenderConstraints | None = None,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> FormattedBlock:
    """Render any value into a block, dispatching on its shape."""
    info = inspect_value(value)
    limits = constraints or _NO_CONSTRAINTS

    if info.shape == "nullable":
        return _single_line("None")

    if info.shape == "scalar":
        if isinstance(value, str):
            return render_string(value, config=config)
        return _single_line(format_scalar(value))

    if info.shape == "record":
        field_count = len(record_fields(value))
        return FormattedBlock(
            lines=(format_value(value),),
            total_count=field_count,
            shown=field_count,
            truncated=False,
        )

    if info.shape == "mapping":
        rendered = [f"{format_value(key)}: {format_value(value[key])}" for key in canonical_keys(value)]
        return render_items(rendered, limits, config=config, brackets=("{", "}"))

    rendered = [format_value(item) for item in sequence_items(value)]
    brackets = ("(", ")") if isinstance(value, tuple) else ("[", "]")
    return render_items(rendered, limits, config=config, brackets=brackets)


def render_collection(
    items: list[Any],
    constraints: RenderConstraints | None = None,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> FormattedBlock:
    return render_items(
        [format_value(item) for item in items],
        constraints or _NO_CONSTRAINTS,
        config=config,
    )


def render_items(
    rendered: list[str],
    constraints: RenderConstraints,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
    brackets: tuple[str, str] = ("[", "]"),
) -> FormattedBlock:
    """Join pre-rendered elements, truncating with an explicit count annotation."""
    opening, closing = brackets
    total = len(rendered)
    limit = constraints.max_items or config.inline_items

    head = min(constraints.head_items or limit, total)
    tail = min(max(0, constraints.tail_items), total - head)

    if total <= limit or head + tail >= total:
        return FormattedBlock(
            lines=(opening + ", ".join(rendered) + closing,),
            total_count=total,
            shown=total,
            truncated=False,
        )

    if tail > 0:
        body = (
            opening
            + ", ".join(rendered[:head])
            + ", ..., "
            + ", ".join(rendered[total - tail :])
            + closing
        )
        note = f"(showing first {head} and last {tail} of {total})"
    else:
        body = opening + ", ".join(rendered[:head]) + ", ..." + closing
        note = f"(showing first {head} of {total})"

    return FormattedBlock(
        lines=(f"{body} {note}",),
        total_count=total,
        shown=head + tail,
        truncated=True,
    )


def render_string(text: str, *, config: EngineConfig = DEFAULT_CONFIG) -> FormattedBlock:
    """Render a string as one quoted line, or as numbered fixed-width lines.

    Long output keeps the first ``head_lines`` and last ``tail_lines`` lines
    and always reports the full character and line counts.
    """
    normalized = normalize_newlines(text)
    if len(normalized) <= config.inline_string_limit and "\n" not in normalized:
        return _single_line(quote(normalized))

    chunks = wrap_lines(normalized, config.line_width)
    total = len(chunks)
    header = f"Length: {len(normalized)} characters, {total} lines"

    if total <= config.head_lines + config.tail_lines:
        body = [f"{index}. {chunk}" for index, chunk in enumerate(chunks, start=1)]
        return FormattedBlock(
            lines=(header, *body),
            total_count=total,
            shown=total,
            truncated=False,
        )

    head = [f"{index}. {chunk}" for index, chunk in enumerate(chunks[: config.head_lines], start=1)]
    tail_start = total - config.tail_lines
    tail = [
        f"{index}. {chunk}"
        for index, chunk in enumerate(chunks[tail_start:], start=tail_start + 1)
    ]
    return FormattedBlock(
        lines=(header, *head, "...", "Last lines:", *tail),
        total_count=total,
        shown=len(head) + len(tail),
        truncated=True,
    )


def wrap_lines(text: str, width: int) -> list[str]:
    chunks: list[str] = []
    for line in text.split("\n"):
        if not line:
            chunks.append("")
            continue
        chunks.extend(line[start : start + width] for start in range(0, len(line), width))
    return chunks


def truncate_text(text: str, limit: int, *, from_end: bool = False) -> str:
    if len(text) <= limit:
        return text
    if from_end:
        return "... (truncated)" + text[len(text) - limit :]
    return text[:limit] + "... (truncated)"


def _single_line(line: str) -> FormattedBlock:
    return FormattedBlock(lines=(line,), total_count=1, shown=1, truncated=False)
