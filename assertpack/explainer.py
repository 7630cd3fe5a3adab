"""Failure-isolated entry points, one per assertion family."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable
import warnings

from assertpack.core.config import DEFAULT_CONFIG, DEFAULT_OPTIONS, EngineConfig, FormatOptions
from assertpack.core.exceptions import PayloadError
from assertpack.core.types import COMPARISON_OPERATORS, ComparisonOperator
from assertpack.messages import (
    DiagnosticMessage,
    explain_any_match,
    explain_compare,
    explain_contain,
    explain_contain_key,
    explain_contain_substring,
    explain_contain_value,
    explain_empty,
    explain_end_with,
    explain_equal,
    explain_error,
    explain_error_as,
    explain_error_is,
    explain_false,
    explain_in_range,
    explain_length,
    explain_no_duplicates,
    explain_no_error,
    explain_none,
    explain_not_contain,
    explain_not_contain_key,
    explain_not_contain_value,
    explain_not_empty,
    explain_not_equal,
    explain_not_none,
    explain_not_raises,
    explain_of_type,
    explain_one_of,
    explain_raises,
    explain_same_time,
    explain_sorted,
    explain_start_with,
    explain_true,
    explain_within,
    fallback_message,
)

MessageBuilder = Callable[..., DiagnosticMessage]


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


UNSET: Any = _Unset()

FAMILY_HEADLINES: dict[str, str] = {
    "equal": "Not equal:",
    "not_equal": "Expected values to be different, but they are equal",
    "true": "Expected true, got false",
    "false": "Expected false, got true",
    "none": "Expected None, but was not",
    "not_none": "Expected not None, but was None",
    "empty": "Expected value to be empty, but it was not:",
    "not_empty": "Expected value to be not empty, but it was empty:",
    "contain": "Expected collection to contain element:",
    "not_contain": "Expected collection to NOT contain element:",
    "no_duplicates": "Expected no duplicates, but found duplicate values:",
    "contain_key": "Expected map to contain key, but key was not found",
    "not_contain_key": "Expected map to NOT contain key, but key was found:",
    "contain_value": "Expected map to contain value, but it was not found:",
    "not_contain_value": "Expected map to NOT contain value, but it was found:",
    "length": "Expected collection to have specific length:",
    "of_type": "Expected value to be of specific type:",
    "one_of": "Expected value to be one of the allowed options:",
    "any_match": "Predicate does not match any item in the collection",
    "sorted": "Expected collection to be in ascending order, but it is not:",
    "in_range": "Expected value to be in range, but it was not:",
    "greater": "Expected value to be greater than threshold:",
    "less": "Expected value to be less than threshold:",
    "greater_or_equal": "Expected value to be greater than or equal to threshold:",
    "less_or_equal": "Expected value to be less than or equal to threshold:",
    "within": "Expected value to be within tolerance, but it was not",
    "raises": "Expected the call to raise, but it did not",
    "not_raises": "Expected the call to not raise, but it raised",
    "error": "Expected an error, but got None",
    "no_error": "Expected no error, but got an error",
    "error_is": "Expected error in error chain, but not found",
    "error_as": "Expected error type in error chain, but not found",
    "start_with": "Expected string to start with prefix, but it does not",
    "end_with": "Expected string to end with suffix, but it does not",
    "contain_substring": "Expected string to contain substring, but it was not found",
    "same_time": "Expected times to be the same, but they differ",
}

KIND_HANDLERS: dict[str, MessageBuilder] = {
    "equal": explain_equal,
    "not_equal": explain_not_equal,
    "true": explain_true,
    "false": explain_false,
    "none": explain_none,
    "not_none": explain_not_none,
    "empty": explain_empty,
    "not_empty": explain_not_empty,
    "contain": explain_contain,
    "not_contain": explain_not_contain,
    "no_duplicates": explain_no_duplicates,
    "contain_key": explain_contain_key,
    "not_contain_key": explain_not_contain_key,
    "contain_value": explain_contain_value,
    "not_contain_value": explain_not_contain_value,
    "length": explain_length,
    "of_type": explain_of_type,
    "one_of": explain_one_of,
    "any_match": explain_any_match,
    "sorted": explain_sorted,
    "in_range": explain_in_range,
    "greater": explain_compare,
    "less": explain_compare,
    "greater_or_equal": explain_compare,
    "less_or_equal": explain_compare,
    "within": explain_within,
    "raises": explain_raises,
    "not_raises": explain_not_raises,
    "error": explain_error,
    "no_error": explain_no_error,
    "error_is": explain_error_is,
    "error_as": explain_error_as,
    "start_with": explain_start_with,
    "end_with": explain_end_with,
    "contain_substring": explain_contain_substring,
    "same_time": explain_same_time,
}

UNARY_KINDS = frozenset(
    {
        "true",
        "false",
        "none",
        "not_none",
        "empty",
        "not_empty",
        "no_duplicates",
        "sorted",
        "not_raises",
        "error",
        "no_error",
    }
)
OPTIONAL_EXPECTED_KINDS = frozenset({"raises", "any_match"})
BOUNDED_KINDS = frozenset({"in_range", "within"})


@dataclass(frozen=True, slots=True)
class Explainer:
    """Builds failure explanations; never raises while producing a message.

    A family that fails internally is reported through a ``RuntimeWarning``
    and replaced by a raw dump of its inputs under the family headline.
    """

    config: EngineConfig = DEFAULT_CONFIG

    def equal(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("equal", actual, expected, options=options)

    def not_equal(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("not_equal", actual, expected, options=options)

    def true(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("true", actual, options=options)

    def false(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("false", actual, options=options)

    def none(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("none", actual, options=options)

    def not_none(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("not_none", actual, options=options)

    def empty(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("empty", actual, options=options)

    def not_empty(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("not_empty", actual, options=options)

    def contain(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("contain", actual, expected, options=options)

    def not_contain(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("not_contain", actual, expected, options=options)

    def no_duplicates(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("no_duplicates", actual, options=options)

    def contain_key(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("contain_key", actual, expected, options=options)

    def not_contain_key(
        self, actual: Any, expected: Any, *, options: FormatOptions | None = None
    ) -> str:
        return self._explain("not_contain_key", actual, expected, options=options)

    def contain_value(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("contain_value", actual, expected, options=options)

    def not_contain_value(
        self, actual: Any, expected: Any, *, options: FormatOptions | None = None
    ) -> str:
        return self._explain("not_contain_value", actual, expected, options=options)

    def length(self, actual: Any, expected: int, *, options: FormatOptions | None = None) -> str:
        return self._explain("length", actual, expected, options=options)

    def of_type(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("of_type", actual, expected, options=options)

    def one_of(self, actual: Any, choices: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("one_of", actual, choices, options=options)

    def any_match(
        self,
        actual: Any,
        predicate: Callable[[Any], bool] | None = None,
        *,
        options: FormatOptions | None = None,
    ) -> str:
        return self._explain("any_match", actual, predicate, options=options)

    def sorted(self, actual: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("sorted", actual, options=options)

    def in_range(
        self,
        actual: Any,
        minimum: Any,
        maximum: Any,
        *,
        options: FormatOptions | None = None,
    ) -> str:
        return self._explain("in_range", actual, minimum, maximum, options=options)

    def compare(
        self,
        actual: Any,
        threshold: Any,
        operator: ComparisonOperator,
        *,
        options: FormatOptions | None = None,
    ) -> str:
        if operator not in COMPARISON_OPERATORS:
            raise PayloadError(f"Unsupported comparison operator: {operator}")
        return self._explain(operator, actual, threshold, operator, options=options)

    def within(
        self,
        actual: Any,
        expected: Any,
        tolerance: Any,
        *,
        options: FormatOptions | None = None,
    ) -> str:
        return self._explain("within", actual, expected, tolerance, options=options)

    def raises(
        self,
        actual: BaseException | None,
        expected: type[BaseException] | None = None,
        *,
        options: FormatOptions | None = None,
    ) -> str:
        return self._explain("raises", actual, expected, options=options)

    def not_raises(self, actual: BaseException, *, options: FormatOptions | None = None) -> str:
        return self._explain("not_raises", actual, options=options)

    def error(self, actual: Any = None, *, options: FormatOptions | None = None) -> str:
        return self._explain("error", actual, options=options)

    def no_error(self, actual: BaseException, *, options: FormatOptions | None = None) -> str:
        return self._explain("no_error", actual, options=options)

    def error_is(
        self,
        actual: BaseException | None,
        target: BaseException,
        *,
        options: FormatOptions | None = None,
    ) -> str:
        return self._explain("error_is", actual, target, options=options)

    def error_as(
        self,
        actual: BaseException | None,
        target: type[BaseException],
        *,
        options: FormatOptions | None = None,
    ) -> str:
        return self._explain("error_as", actual, target, options=options)

    def start_with(self, actual: str, expected: str, *, options: FormatOptions | None = None) -> str:
        return self._explain("start_with", actual, expected, options=options)

    def end_with(self, actual: str, expected: str, *, options: FormatOptions | None = None) -> str:
        return self._explain("end_with", actual, expected, options=options)

    def contain_substring(
        self, actual: str, expected: str, *, options: FormatOptions | None = None
    ) -> str:
        return self._explain("contain_substring", actual, expected, options=options)

    def same_time(self, actual: Any, expected: Any, *, options: FormatOptions | None = None) -> str:
        return self._explain("same_time", actual, expected, options=options)

    def explain(
        self,
        kind: str,
        actual: Any,
        expected: Any = UNSET,
        *,
        options: FormatOptions | None = None,
    ) -> str:
        """Dispatch by family name, as used by payload-driven callers.

        ``in_range`` takes ``(minimum, maximum)`` and ``within`` takes
        ``(expected, tolerance)`` as the expected value.
        """
        if kind not in KIND_HANDLERS:
            raise PayloadError(f"Unknown assertion kind: {kind}")

        if kind in UNARY_KINDS:
            return self._explain(kind, actual, options=options)
        if kind in OPTIONAL_EXPECTED_KINDS:
            return self._explain(kind, actual, None if expected is UNSET else expected, options=options)
        if expected is UNSET:
            raise PayloadError(f"Assertion kind {kind} requires an expected value")
        if kind in COMPARISON_OPERATORS:
            return self._explain(kind, actual, expected, kind, options=options)
        if kind in BOUNDED_KINDS:
            if not isinstance(expected, (list, tuple)) or len(expected) != 2:
                raise PayloadError(f"Assertion kind {kind} expects a pair as the expected value")
            return self._explain(kind, actual, expected[0], expected[1], options=options)
        return self._explain(kind, actual, expected, options=options)

    def build(
        self,
        kind: str,
        *values: Any,
        options: FormatOptions | None = None,
    ) -> DiagnosticMessage:
        """Structured message for ``kind``, before rendering."""
        builder = KIND_HANDLERS.get(kind)
        if builder is None:
            raise PayloadError(f"Unknown assertion kind: {kind}")
        resolved = options or DEFAULT_OPTIONS
        try:
            message = builder(*values, options=resolved, config=self.config)
        except Exception as error:
            warnings.warn(
                (
                    f"AssertPack explanation failure: kind={kind} "
                    f"error={error.__class__.__name__}: {error}"
                ),
                RuntimeWarning,
                stacklevel=3,
            )
            message = fallback_message(FAMILY_HEADLINES[kind], values)
        return message.with_custom_message(resolved.message)

    def _explain(self, kind: str, *values: Any, options: FormatOptions | None) -> str:
        return self.build(kind, *values, options=options).render()
