import pytest

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.exceptions import EngineConfigError, PayloadError
from assertpack.explainer import FAMILY_HEADLINES, KIND_HANDLERS, Explainer


class _BrokenLength:
    def __len__(self) -> int:
        raise RuntimeError("length unavailable")

    def __repr__(self) -> str:
        return "<broken length>"


def test_custom_message_is_first_line_verbatim() -> None:
    options = FormatOptions(message="totals must match")

    message = Explainer().equal(2, 1, options=options)

    assert message.split("\n")[0] == "totals must match"
    assert message.split("\n")[1] == "Not equal:"


def test_empty_custom_message_is_ignored() -> None:
    assert Explainer().equal(2, 1, options=FormatOptions(message="")).startswith("Not equal:")


def test_messages_without_hints_have_no_blank_line() -> None:
    assert "" not in Explainer().length([1], 3).split("\n")


def test_family_failure_is_isolated_with_warning() -> None:
    with pytest.warns(RuntimeWarning, match="kind=length"):
        message = Explainer().length(_BrokenLength(), 3)

    assert message.split("\n") == [
        "Expected collection to have specific length:",
        "actual  : <broken length>",
        "expected: 3",
    ]


def test_fallback_keeps_custom_message() -> None:
    with pytest.warns(RuntimeWarning):
        message = Explainer().length(_BrokenLength(), 3, options=FormatOptions(message="ctx"))

    assert message.split("\n")[0] == "ctx"


def test_invalid_thresholds_are_rejected_at_construction() -> None:
    with pytest.raises(EngineConfigError):
        EngineConfig(max_similar=0)
    with pytest.raises(ValueError):
        EngineConfig(inline_items=-1)
    with pytest.raises(EngineConfigError):
        FormatOptions(max_items=0)


def test_every_kind_has_a_fallback_headline() -> None:
    assert set(KIND_HANDLERS) == set(FAMILY_HEADLINES)


def test_explain_dispatches_by_kind() -> None:
    explainer = Explainer()

    assert explainer.explain("equal", 2, 1) == explainer.equal(2, 1)
    assert explainer.explain("true", False) == "Expected true, got false"
    assert explainer.explain("in_range", 15, [1, 10]) == explainer.in_range(15, 1, 10)
    assert explainer.explain("within", 10.5, (10.0, 0.1)) == explainer.within(10.5, 10.0, 0.1)
    assert explainer.explain("greater", 5, 10) == explainer.compare(5, 10, "greater")
    assert explainer.explain("raises", None) == explainer.raises(None)


def test_explain_rejects_bad_payloads() -> None:
    explainer = Explainer()

    with pytest.raises(PayloadError):
        explainer.explain("no_such_kind", 1, 2)
    with pytest.raises(PayloadError):
        explainer.explain("equal", 1)
    with pytest.raises(PayloadError):
        explainer.explain("in_range", 15, 1)
    with pytest.raises(PayloadError):
        explainer.compare(1, 2, "roughly")


def test_explanations_are_deterministic() -> None:
    explainer = Explainer()
    actual = {"b": [1, 2, 3], "a": {"x": 1}}
    expected = {"a": {"x": 2}, "b": [1, 2]}

    assert explainer.equal(actual, expected) == explainer.equal(actual, expected)


def test_build_returns_structured_message() -> None:
    message = Explainer().build("contain", ["banana"], "banan")

    assert message.headline == "Expected collection to contain element:"
    assert message.to_dict()["hints"] == [
        "Found similar: \"banana\" (at index 0) - extra 'a' at position 6"
    ]
