from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest

from assertpack.core.config import EngineConfig
from assertpack.render import (
    RenderConstraints,
    format_concise,
    format_time,
    format_value,
    humanize_duration,
    render_collection,
    render_string,
    render_value,
)
from assertpack.render.blocks import truncate_text


@dataclass
class _Wide:
    first: str
    second: str
    third: str
    fourth: str


def test_first_three_of_fifteen_keeps_total_count() -> None:
    block = render_collection(list(range(15)), RenderConstraints(max_items=3))

    assert block.shown == 3
    assert block.total_count == 15
    assert block.truncated is True
    assert block.text == "[0, 1, 2, ...] (showing first 3 of 15)"


def test_head_and_tail_view_of_long_collection() -> None:
    constraints = RenderConstraints(max_items=4, head_items=2, tail_items=2)

    block = render_collection(list(range(20)), constraints)

    assert block.text == "[0, 1, ..., 18, 19] (showing first 2 and last 2 of 20)"
    assert block.shown == 4


def test_small_values_render_inline_untruncated() -> None:
    assert render_value([1, 2]).text == "[1, 2]"
    assert render_value((1, 2)).text == "(1, 2)"
    assert render_value({"b": 2, "a": 1}).text == '{"a": 1, "b": 2}'
    assert render_value(None).text == "None"

    block = render_value([1, 2])
    assert (block.shown, block.total_count, block.truncated) == (2, 2, False)


def test_short_string_is_one_quoted_line() -> None:
    block = render_string("hi")

    assert block.lines == ('"hi"',)
    assert (block.total_count, block.shown) == (1, 1)


def test_long_multiline_string_keeps_head_and_tail_lines() -> None:
    text = "\n".join(f"line {number}" for number in range(1, 13))

    block = render_string(text)

    assert block.lines[0] == f"Length: {len(text)} characters, 12 lines"
    assert block.lines[1] == "1. line 1"
    assert block.lines[5] == "5. line 5"
    assert block.lines[6] == "..."
    assert block.lines[7] == "Last lines:"
    assert block.lines[-1] == "12. line 12"
    assert (block.total_count, block.shown, block.truncated) == (12, 8, True)


def test_long_single_line_string_is_wrapped_at_line_width() -> None:
    block = render_string("x" * 120)

    assert block.lines[0] == "Length: 120 characters, 3 lines"
    assert block.lines[1] == "1. " + "x" * 56
    assert block.lines[3] == "3. " + "x" * 8
    assert block.truncated is False


def test_carriage_returns_are_normalized() -> None:
    block = render_string("a\r\nb", config=EngineConfig(inline_string_limit=80))

    assert block.lines == ("Length: 3 characters, 2 lines", "1. a", "2. b")


def test_rendering_is_idempotent() -> None:
    value = {"names": ["x" * 10] * 12, "count": 12}
    constraints = RenderConstraints(max_items=3)

    assert render_value(value, constraints) == render_value(value, constraints)


def test_truncate_text_marks_cut_side() -> None:
    assert truncate_text("abcdef", 10) == "abcdef"
    assert truncate_text("abcdef", 3) == "abc... (truncated)"
    assert truncate_text("abcdef", 3, from_end=True) == "... (truncated)def"


def test_concise_format_bounds_strings_and_collections() -> None:
    assert format_concise("x" * 40) == '"' + "x" * 27 + '..."'
    assert format_concise([1, 2, 3, 4]) == "[4 items]"
    assert format_concise({"a": 1, "b": 2}) == "{2 entries}"
    assert format_concise({"a": 1}) == '{"a": 1}'


def test_concise_record_respects_character_budget() -> None:
    wide = _Wide("a" * 30, "b" * 30, "c" * 30, "d" * 30)

    rendered = format_concise(wide)

    assert rendered.startswith("_Wide(first=")
    assert rendered.endswith(", ...)")


def test_full_format_guards_against_cycles() -> None:
    looped: list = [1]
    looped.append(looped)

    assert format_value(looped) == "[1, <...>]"


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (timedelta(microseconds=500), "0.500ms"),
        (timedelta(milliseconds=150), "150ms"),
        (timedelta(seconds=2.5), "2.5s"),
        (timedelta(minutes=10, seconds=30), "10m30s"),
        (timedelta(hours=3), "3h"),
        (timedelta(days=1, hours=1), "1d1h"),
        (timedelta(seconds=-2), "2s"),
    ],
)
def test_humanize_duration(duration: timedelta, expected: str) -> None:
    assert humanize_duration(duration) == expected


def test_format_time_trims_fraction_and_names_zone() -> None:
    moment = datetime(2024, 1, 2, 3, 4, 5, 500000, tzinfo=timezone.utc)

    assert format_time(moment) == "2024-01-02 03:04:05.5 UTC"
    assert format_time(moment.replace(tzinfo=None, microsecond=0)) == "2024-01-02 03:04:05"
