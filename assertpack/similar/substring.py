"""Near-miss search for a substring inside a larger text."""

from __future__ import annotations

from assertpack.core.config import DEFAULT_CONFIG, EngineConfig
from assertpack.similar.distance import damerau_levenshtein_distance, levenshtein_distance
from assertpack.similar.matcher import describe_difference
from assertpack.similar.models import SimilarityCandidate

_MAX_SUBSTRING_EDITS = 2
_MIN_LENGTH_RATIO = 0.85
_WIDTH_OFFSETS = (0, -1, 1, -2, 2)


def find_case_mismatch(text: str, needle: str) -> SimilarityCandidate | None:
    """Locate ``needle`` in ``text`` when it only occurs with different casing."""
    if not needle or needle in text:
        return None

    target = needle.casefold()
    width = len(needle)
    for start in range(len(text) - width + 1):
        window = text[start : start + width]
        if window.casefold() == target:
            return SimilarityCandidate(
                candidate=window,
                distance=levenshtein_distance(needle, window),
                kind="exact_case",
                position=start,
                details="case difference",
            )
    return None


def find_similar_substring(
    text: str,
    needle: str,
    *,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SimilarityCandidate | None:
    """Best window of ``text`` within two edits of ``needle``, or ``None``.

    Windows range over ``len(needle) - 2`` to ``len(needle) + 2`` characters
    and must keep at least 85% of the needle's length. When the needle has no
    spaces, windows containing spaces are ignored.
    """
    if not needle or not text or len(needle) > config.similarity_query_cap:
        return None

    minimum_width = _MIN_LENGTH_RATIO * len(needle)
    needle_has_space = " " in needle
    seen: set[str] = set()
    best: tuple[tuple[int, int, int], str] | None = None

    for offset in _WIDTH_OFFSETS:
        width = len(needle) + offset
        if width < 1 or width < minimum_width or width > len(text):
            continue
        for start in range(len(text) - width + 1):
            window = text[start : start + width]
            if window == needle or window in seen:
                continue
            if not needle_has_space and " " in window:
                continue
            distance = damerau_levenshtein_distance(needle, window)
            if distance > _MAX_SUBSTRING_EDITS:
                continue
            seen.add(window)
            rank = (distance, start, abs(offset))
            if best is None or rank < best[0]:
                best = (rank, window)

    if best is None:
        return None

    (distance, start, _), window = best
    kind, details = describe_difference(needle, window)
    return SimilarityCandidate(
        candidate=window,
        distance=distance,
        kind=kind,
        position=start,
        details=details,
    )
