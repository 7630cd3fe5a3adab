"""Ranked near-miss hints for strings and numbers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import math
import re
from typing import Any, Literal

from assertpack.core.canonical import canonical_keys
from assertpack.core.config import DEFAULT_CONFIG, EngineConfig
from assertpack.core.shapes import is_nan, is_number
from assertpack.render.values import format_number, format_signed
from assertpack.similar.distance import levenshtein_distance
from assertpack.similar.models import SimilarityCandidate

KindHint = Literal["string", "number"]

_NUMBER_WORDS = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
    "ten": "10",
    "eleven": "11",
    "twelve": "12",
    "thirteen": "13",
    "fourteen": "14",
    "fifteen": "15",
    "sixteen": "16",
    "seventeen": "17",
    "eighteen": "18",
    "nineteen": "19",
    "twenty": "20",
}
_TOKEN_BOUNDARY_PATTERN = re.compile(
    r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[A-Za-z])(?=[0-9])|(?<=[0-9])(?=[A-Za-z])"
)
_SEPARATOR_PATTERN = re.compile(r"[-_. ]+")


def identifier_fold(text: str) -> str:
    """Case-fold, drop separators and spell number words as digits.

    ``"userThree"``, ``"user_3"`` and ``"User-3"`` all fold to ``"user3"``.
    Only whole tokens, split at separators and camelCase humps, count as
    number words, so ``"done"`` stays ``"done"``.
    """
    tokens = _SEPARATOR_PATTERN.split(_TOKEN_BOUNDARY_PATTERN.sub(" ", text))
    folded = (token.casefold() for token in tokens)
    return "".join(_NUMBER_WORDS.get(token, token) for token in folded)


def similarity_threshold(query: str, config: EngineConfig = DEFAULT_CONFIG) -> int:
    return max(1, len(query) // config.similarity_divisor)


def find_similar(
    query: Any,
    candidates: Iterable[Any] | Mapping[Any, Any],
    *,
    config: EngineConfig = DEFAULT_CONFIG,
    kind_hint: KindHint | None = None,
) -> list[SimilarityCandidate]:
    """Return up to ``config.max_similar`` near misses for ``query``.

    Candidates from a mapping are searched by value with the key as position.
    Exact matches are never reported. Results are ordered by distance, then
    by original position.
    """
    pairs = _positioned(candidates)

    mode = kind_hint
    if mode is None:
        if isinstance(query, str):
            mode = "string"
        elif is_number(query):
            mode = "number"
        else:
            return []

    if mode == "string":
        if not isinstance(query, str):
            return []
        return find_similar_strings(query, pairs, config=config)
    if not is_number(query) or is_nan(query):
        return []
    return find_similar_numbers(query, pairs, config=config)


def find_similar_strings(
    query: str,
    pairs: list[tuple[Any, Any]],
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[SimilarityCandidate]:
    if len(query) > config.similarity_query_cap:
        return []

    threshold = similarity_threshold(query, config)
    query_folded = query.casefold()
    query_identifier = identifier_fold(query)

    ranked: list[tuple[int, SimilarityCandidate]] = []
    for ordinal, (position, candidate) in enumerate(pairs):
        if not isinstance(candidate, str) or candidate == query:
            continue

        distance = levenshtein_distance(query, candidate)
        case_equal = candidate.casefold() == query_folded
        identifier_equal = identifier_fold(candidate) == query_identifier
        if distance > threshold and not case_equal and not identifier_equal:
            continue

        kind, details = _classify_string(query, candidate, distance, case_equal, identifier_equal)
        ranked.append(
            (
                ordinal,
                SimilarityCandidate(
                    candidate=candidate,
                    distance=distance,
                    kind=kind,
                    position=position,
                    details=details,
                ),
            )
        )

    ranked.sort(key=lambda item: (item[1].distance, item[0]))
    return [candidate for _, candidate in ranked[: config.max_similar]]


def find_similar_numbers(
    query: Any,
    pairs: list[tuple[Any, Any]],
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[SimilarityCandidate]:
    scored: list[tuple[float, int, Any, Any, Any]] = []
    for ordinal, (position, candidate) in enumerate(pairs):
        if not is_number(candidate) or is_nan(candidate):
            continue
        difference = _difference(candidate, query)
        if difference == 0 or (isinstance(difference, float) and math.isnan(difference)):
            continue
        scored.append((abs(difference), ordinal, position, candidate, difference))

    if not scored:
        return []

    scored.sort(key=lambda item: (item[0], item[1]))
    qualified = [item for item in scored if item[0] <= config.numeric_proximity_delta]
    if not qualified:
        qualified = scored[:1]

    return [
        SimilarityCandidate(
            candidate=candidate,
            distance=gap,
            kind="numeric_proximity",
            position=position,
            details=f"differs by {format_signed(difference)}",
        )
        for gap, _, position, candidate, difference in qualified[: config.max_similar]
    ]


def describe_difference(query: str, candidate: str) -> tuple[str, str]:
    """Classify how ``candidate`` differs from ``query`` and describe it."""
    distance = levenshtein_distance(query, candidate)
    return _classify_string(
        query,
        candidate,
        distance,
        candidate.casefold() == query.casefold(),
        identifier_fold(candidate) == identifier_fold(query),
    )


def _positioned(candidates: Iterable[Any] | Mapping[Any, Any]) -> list[tuple[Any, Any]]:
    if isinstance(candidates, Mapping):
        return [(key, candidates[key]) for key in canonical_keys(candidates)]
    return list(enumerate(candidates))


def _difference(candidate: Any, query: Any) -> Any:
    try:
        return candidate - query
    except TypeError:
        return float(candidate) - float(query)


def _classify_string(
    query: str,
    candidate: str,
    distance: int,
    case_equal: bool,
    identifier_equal: bool,
) -> tuple[str, str]:
    if case_equal:
        return "case_only", "case difference"

    length_gap = len(candidate) - len(query)
    if length_gap != 0 and distance == abs(length_gap):
        if length_gap > 0:
            return "extra_chars", _insertion_details("extra", query, candidate)
        return "missing_chars", _insertion_details("missing", candidate, query)

    details = _typo_details(query, candidate, distance)
    if identifier_equal:
        details += " (same identifier ignoring case and separators)"
    return "typo", details


def _insertion_details(label: str, shorter: str, longer: str) -> str:
    prefix = 0
    while prefix < len(shorter) and shorter[prefix] == longer[prefix]:
        prefix += 1
    suffix = 0
    while suffix < len(shorter) - prefix and shorter[-1 - suffix] == longer[-1 - suffix]:
        suffix += 1

    gap = len(longer) - len(shorter)
    if prefix + suffix == len(shorter):
        segment = longer[prefix : len(longer) - suffix]
        return f"{label} '{segment}' at position {prefix + 1}"
    noun = "character" if gap == 1 else "characters"
    return f"{gap} {label} {noun}"


def _typo_details(query: str, candidate: str, distance: int) -> str:
    if len(query) == len(candidate):
        mismatches = [
            index
            for index, (expected, found) in enumerate(zip(query, candidate))
            if expected != found
        ]
        if len(mismatches) == 1:
            index = mismatches[0]
            return f"'{candidate[index]}' ≠ '{query[index]}' at position {index + 1}"
        if (
            len(mismatches) == 2
            and mismatches[1] == mismatches[0] + 1
            and query[mismatches[0]] == candidate[mismatches[1]]
            and query[mismatches[1]] == candidate[mismatches[0]]
        ):
            return f"adjacent characters swapped at position {mismatches[0] + 1}"
    if distance == 1:
        return "1 character differs"
    return f"{format_number(distance)} characters differ"
