from assertpack.core.config import EngineConfig
from assertpack.similar import find_case_mismatch, find_similar_substring


def test_case_mismatch_reports_original_casing_and_offset() -> None:
    match = find_case_mismatch("Hello World", "world")

    assert match is not None
    assert match.candidate == "World"
    assert match.position == 6
    assert match.kind == "exact_case"


def test_case_mismatch_is_none_when_text_contains_needle() -> None:
    assert find_case_mismatch("hello world", "world") is None
    assert find_case_mismatch("hello world", "") is None
    assert find_case_mismatch("hello world", "planet") is None


def test_similar_substring_finds_transposed_word() -> None:
    match = find_similar_substring("The quick brown fox", "quikc")

    assert match is not None
    assert match.candidate == "quick"
    assert match.position == 4
    assert match.distance == 1
    assert match.kind == "typo"
    assert match.details == "adjacent characters swapped at position 4"


def test_similar_substring_returns_none_without_close_window() -> None:
    assert find_similar_substring("abcdef", "xyz") is None
    assert find_similar_substring("", "xyz") is None


def test_similar_substring_respects_query_cap() -> None:
    text = "a" * 40
    needle = "a" * 10 + "b"

    assert find_similar_substring(text, needle, config=EngineConfig(similarity_query_cap=10)) is None
    assert find_similar_substring(text, needle) is not None
