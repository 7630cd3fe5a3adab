"""Content rendering subsystem for AssertPack."""

from assertpack.render.blocks import render_collection, render_items, render_string, render_value
from assertpack.render.models import FormattedBlock, RenderConstraints
from assertpack.render.values import (
    format_concise,
    format_number,
    format_time,
    format_value,
    humanize_duration,
)

__all__ = [
    "FormattedBlock",
    "RenderConstraints",
    "render_value",
    "render_string",
    "render_collection",
    "render_items",
    "format_value",
    "format_concise",
    "format_number",
    "format_time",
    "humanize_duration",
]
