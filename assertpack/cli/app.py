from dataclasses import dataclass
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version as package_version
import json
from pathlib import Path
from typing import Any

import typer

from assertpack.core.config import EngineConfig, FormatOptions
from assertpack.core.exceptions import AssertPackError, PayloadError
from assertpack.diff import DiffEntry, diff_values, render_diff_entries
from assertpack.explainer import KIND_HANDLERS, Explainer
from assertpack.numeric import describe_position, format_sorted_window, locate_insertion_context
from assertpack.render.values import format_concise, format_value
from assertpack.similar import find_similar

app = typer.Typer(help="AssertKit CLI")

_ERROR_KINDS = frozenset({"raises", "not_raises", "no_error", "error_is", "error_as"})
_ERROR_TYPE_KINDS = frozenset({"raises", "error_as"})
_TIME_KINDS = frozenset({"same_time"})


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()
_SYNTHETIC_ERRORS: dict[str, type[Exception]] = {}


def _resolve_cli_version() -> str:
    try:
        return package_version("assertkit")
    except PackageNotFoundError:
        from assertkit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show AssertKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
            default=str,
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=False,
            sort_keys=True,
            indent=2,
            default=str,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _fail(message: str, *, json_output: bool, exit_code: int, **extra: Any) -> typer.Exit:
    if json_output:
        _echo_json({"status": "error", "exit_code": exit_code, "message": message, **extra})
    else:
        _echo(message, err=True)
    return typer.Exit(code=exit_code)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise PayloadError(f"payload not found: {path}") from error
    except json.JSONDecodeError as error:
        raise PayloadError(f"invalid JSON in {path}: {error.msg} (line {error.lineno})") from error


def _synthetic_error_type(name: str) -> type[Exception]:
    if name not in _SYNTHETIC_ERRORS:
        _SYNTHETIC_ERRORS[name] = type(name, (Exception,), {})
    return _SYNTHETIC_ERRORS[name]


def _decode_error(raw: Any) -> Exception | None:
    """Build an exception from ``{"type", "message", "cause"}``; ``null`` stays ``None``."""
    if raw is None:
        return None
    if not isinstance(raw, dict) or "type" not in raw:
        raise PayloadError('error values must be null or objects with "type" and "message"')
    error = _synthetic_error_type(str(raw["type"]))(str(raw.get("message", "")))
    cause = raw.get("cause")
    if cause is not None:
        error.__cause__ = _decode_error(cause)
    return error


def _decode_time(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise PayloadError("time values must be ISO-8601 strings")
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as error:
        raise PayloadError(f"invalid ISO-8601 time: {raw}") from error


def _decode_payload(kind: str, payload: Any) -> tuple[Any, dict[str, Any], FormatOptions]:
    if not isinstance(payload, dict) or "actual" not in payload:
        raise PayloadError('payload must be an object with an "actual" field')

    actual = payload["actual"]
    extra: dict[str, Any] = {}
    if "expected" in payload:
        extra["expected"] = payload["expected"]

    if kind in _ERROR_KINDS:
        actual = _decode_error(actual)
        if kind == "error_is" and "expected" in extra:
            extra["expected"] = _decode_error(extra["expected"])
    if kind in _ERROR_TYPE_KINDS and isinstance(extra.get("expected"), str):
        extra["expected"] = _synthetic_error_type(extra["expected"])
    if kind in _TIME_KINDS:
        actual = _decode_time(actual)
        if "expected" in extra:
            extra["expected"] = _decode_time(extra["expected"])

    options = FormatOptions.from_dict(payload.get("options"))
    return actual, extra, options


def _coerce_number(raw: str) -> int | float | None:
    for parse in (int, float):
        try:
            return parse(raw)
        except ValueError:
            continue
    return None


@app.command()
def explain(
    kind: str = typer.Argument(..., help="Assertion family, for example equal or contain_key."),
    payload_path: Path = typer.Argument(..., help='JSON file with "actual", "expected" and "options".'),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable output.",
    ),
) -> None:
    """Explain why an assertion of KIND failed for the given payload."""
    if kind not in KIND_HANDLERS:
        raise _fail(
            f"explain failed: unknown kind {kind!r}",
            json_output=json_output,
            exit_code=2,
            kind=kind,
        )

    try:
        actual, extra, options = _decode_payload(kind, _read_json(payload_path))
        message = Explainer(EngineConfig()).explain(kind, actual, options=options, **extra)
    except AssertPackError as error:
        raise _fail(
            f"explain failed: {error}",
            json_output=json_output,
            exit_code=1,
            kind=kind,
        ) from error

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "kind": kind,
                "message": message,
            }
        )
        return
    _echo(message)


@app.command()
def similar(
    query: str = typer.Argument(..., help="Value that was not found."),
    candidates: list[str] = typer.Argument(..., help="Values that were available."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable output.",
    ),
) -> None:
    """Rank candidates that look like a near miss of QUERY."""
    numeric_query = _coerce_number(query)
    numeric_candidates = [_coerce_number(candidate) for candidate in candidates]
    if numeric_query is not None and all(value is not None for value in numeric_candidates):
        matches = find_similar(numeric_query, numeric_candidates, config=EngineConfig())
        rendered_query: Any = numeric_query
    else:
        matches = find_similar(query, candidates, config=EngineConfig(), kind_hint="string")
        rendered_query = query

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "query": rendered_query,
                "matches": [match.to_dict() for match in matches],
            }
        )
        return

    if not matches:
        _echo(f"no similar candidates for {format_value(rendered_query)}")
        return
    for match in matches:
        _echo(f"{format_value(match.candidate)} (at index {match.position}) - {match.details}")


@app.command()
def locate(
    query: float = typer.Argument(..., help="Number that was not found."),
    numbers: list[float] = typer.Argument(..., help="Numbers in the collection."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable output.",
    ),
) -> None:
    """Show where QUERY would sit in the sorted collection."""
    config = EngineConfig()
    context = locate_insertion_context(query, numbers, window=config.neighbor_window)

    if json_output:
        _echo_json({"status": "ok", "exit_code": 0, **context.to_dict()})
        return

    if context.unsupported_reason:
        _echo(f"cannot locate {format_value(query)}: {context.unsupported_reason}")
        return
    if context.found:
        _echo(f"{format_value(query)} is present at sorted index {context.insert_index}")
    else:
        _echo(describe_position(context) or f"no neighbours for {format_value(query)}")
    if context.total:
        _echo(f"Sorted view: {format_sorted_window(context)}")


@app.command()
def diff(
    expected_path: Path = typer.Argument(..., help="JSON file with the expected value."),
    actual_path: Path = typer.Argument(..., help="JSON file with the actual value."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    max_changes: int = typer.Option(
        8,
        "--max-changes",
        help="Maximum number of differences to print in text mode.",
    ),
) -> None:
    """Print path-qualified differences between two JSON values."""
    try:
        expected = _read_json(expected_path)
        actual = _read_json(actual_path)
    except PayloadError as error:
        raise _fail(
            f"diff failed: {error}",
            json_output=json_output,
            exit_code=1,
            expected_path=str(expected_path),
            actual_path=str(actual_path),
        ) from error

    entries = diff_values(expected, actual)
    identical = not entries and not _length_differs(expected, actual)
    if not identical and not entries:
        entries = [
            DiffEntry(
                path=(),
                location="",
                expected_repr=format_concise(expected),
                actual_repr=format_concise(actual),
            )
        ]

    if json_output:
        _echo_json(
            {
                "status": "ok",
                "exit_code": 0,
                "identical": identical,
                "differences": [entry.to_dict() for entry in entries],
                "expected_path": str(expected_path),
                "actual_path": str(actual_path),
            }
        )
        return

    if identical:
        _echo("no differences")
        return
    noun = "difference" if len(entries) == 1 else "differences"
    _echo(f"{len(entries)} {noun}:")
    for line in render_diff_entries(entries, max_lines=max(1, max_changes)):
        _echo(line)


def _length_differs(expected: Any, actual: Any) -> bool:
    """Top-level sequence lengths, which ``diff_values`` leaves to the caller."""
    return isinstance(expected, list) and isinstance(actual, list) and len(expected) != len(actual)


def main() -> None:
    app()
