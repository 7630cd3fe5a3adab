from assertpack.core.config import FormatOptions
from assertpack.explainer import Explainer
from assertpack.messages.errors import error_chain


def _lines(text: str) -> list[str]:
    return text.split("\n")


def _chained() -> RuntimeError:
    try:
        try:
            raise ValueError("inner")
        except ValueError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as outer:
        return outer


def test_raises_when_nothing_was_raised() -> None:
    explainer = Explainer()

    assert explainer.raises(None, ValueError) == (
        "Expected the call to raise ValueError, but it did not raise"
    )
    assert explainer.raises(None) == "Expected the call to raise, but it did not raise"


def test_raises_with_wrong_exception_type() -> None:
    assert _lines(Explainer().raises(TypeError("bad"), ValueError)) == [
        "Expected the call to raise ValueError, but it raised TypeError",
        "Expected Type: ValueError",
        "Actual Type  : TypeError",
        'Message      : "bad"',
    ]


def test_raises_notes_expected_type_in_chain() -> None:
    lines = _lines(Explainer().raises(_chained(), ValueError))

    assert lines[-1] == "Note: ValueError was found in the exception chain (raised as RuntimeError)"


def test_not_raises_without_and_with_stack_trace() -> None:
    error = _chained()
    explainer = Explainer()

    plain = explainer.not_raises(error)
    traced = explainer.not_raises(error, options=FormatOptions(stack_trace=True))

    assert plain == "Expected the call to not raise, but it raised: RuntimeError: outer"
    assert "Stack trace:" in _lines(traced)
    assert "Traceback (most recent call last):" in traced


def test_error_and_no_error() -> None:
    explainer = Explainer()

    assert explainer.error(None) == "Expected an error, but got None"
    assert _lines(explainer.no_error(ValueError("boom"))) == [
        "Expected no error, but got an error",
        'Error: "boom"',
        "Type : ValueError",
    ]


def test_error_is_lists_chain_types() -> None:
    assert _lines(Explainer().error_is(_chained(), KeyError("missing"))) == [
        "Expected error to be \"'missing'\", but not found in error chain",
        'Error: "outer"',
        "Types: [RuntimeError, ValueError]",
    ]


def test_error_as_with_missing_error() -> None:
    explainer = Explainer()

    assert explainer.error_as(None, KeyError) == "Expected error to be KeyError, but got None"
    assert explainer.error_as(_chained(), KeyError).startswith(
        "Expected error to be KeyError, but type not found in error chain"
    )


def test_error_chain_stops_on_cycles() -> None:
    first = ValueError("first")
    second = ValueError("second")
    first.__cause__ = second
    second.__cause__ = first

    assert error_chain(first) == [first, second]
