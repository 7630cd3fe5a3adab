"""Similarity matching subsystem for AssertPack."""

from assertpack.similar.distance import damerau_levenshtein_distance, levenshtein_distance
from assertpack.similar.matcher import find_similar, identifier_fold, similarity_threshold
from assertpack.similar.models import SimilarityCandidate
from assertpack.similar.substring import find_case_mismatch, find_similar_substring

__all__ = [
    "SimilarityCandidate",
    "levenshtein_distance",
    "damerau_levenshtein_distance",
    "find_similar",
    "identifier_fold",
    "similarity_threshold",
    "find_case_mismatch",
    "find_similar_substring",
]
