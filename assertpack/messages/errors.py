"""Raised-exception and error-chain explanations."""

from __future__ import annotations

import traceback
from typing import Any

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.messages.base import DiagnosticMessage, Row, labeled
from assertpack.render.values import quote


def explain_raises(
    actual: BaseException | None,
    expected: type[BaseException] | None = None,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    if actual is None:
        if expected is None:
            return DiagnosticMessage(headline="Expected the call to raise, but it did not raise")
        return DiagnosticMessage(
            headline=f"Expected the call to raise {expected.__name__}, but it did not raise"
        )

    wanted = expected.__name__ if expected is not None else "an exception"
    rows: list[Row] = [
        ("Expected Type", wanted),
        ("Actual Type", type(actual).__name__),
        ("Message", quote(str(actual))),
    ]
    hints: tuple[str, ...] = ()
    if expected is not None and not isinstance(actual, expected):
        matches = [item for item in error_chain(actual) if isinstance(item, expected)]
        if matches:
            hints = (
                f"Note: {expected.__name__} was found in the exception chain "
                f"(raised as {type(actual).__name__})",
            )
    return DiagnosticMessage(
        headline=f"Expected the call to raise {wanted}, but it raised {type(actual).__name__}",
        details=tuple(labeled(rows)),
        hints=hints,
    )


def explain_not_raises(
    actual: BaseException,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    headline = f"Expected the call to not raise, but it raised: {_describe(actual)}"
    details: list[str] = []
    if options.stack_trace and actual.__traceback__ is not None:
        details.append("Stack trace:")
        formatted = "".join(traceback.format_exception(type(actual), actual, actual.__traceback__))
        details.extend(formatted.rstrip("\n").split("\n"))
    return DiagnosticMessage(headline=headline, details=tuple(details))


def explain_error(actual: Any, *, options: FormatOptions, config: EngineConfig) -> DiagnosticMessage:
    return DiagnosticMessage(headline="Expected an error, but got None")


def explain_no_error(
    actual: BaseException,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    rows: list[Row] = [("Error", quote(str(actual))), ("Type", type(actual).__name__)]
    return DiagnosticMessage(
        headline="Expected no error, but got an error",
        details=tuple(labeled(rows)),
    )


def explain_error_is(
    actual: BaseException | None,
    target: BaseException,
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    target_text = quote(str(target))
    if actual is None:
        return DiagnosticMessage(headline=f"Expected error to be {target_text}, but got None")
    return DiagnosticMessage(
        headline=f"Expected error to be {target_text}, but not found in error chain",
        details=tuple(_chain_rows(actual)),
    )


def explain_error_as(
    actual: BaseException | None,
    target: type[BaseException],
    *,
    options: FormatOptions,
    config: EngineConfig,
) -> DiagnosticMessage:
    name = target.__name__ if isinstance(target, type) else type(target).__name__
    if actual is None:
        return DiagnosticMessage(headline=f"Expected error to be {name}, but got None")
    return DiagnosticMessage(
        headline=f"Expected error to be {name}, but type not found in error chain",
        details=tuple(_chain_rows(actual)),
    )


def error_chain(error: BaseException) -> list[BaseException]:
    """The error followed by its causes, each visited once."""
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def _chain_rows(error: BaseException) -> list[str]:
    types = ", ".join(type(item).__name__ for item in error_chain(error))
    rows: list[Row] = [("Error", quote(str(error))), ("Types", f"[{types}]")]
    return labeled(rows)


def _describe(error: BaseException) -> str:
    message = str(error)
    if not message:
        return type(error).__name__
    return f"{type(error).__name__}: {message}"
