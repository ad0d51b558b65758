"""Jaro similarity and distance between two sequences."""

from __future__ import annotations

from typing import Hashable, Sequence

from .jaro_flags import (
    count_transpositions,
    flag_similar_characters,
    jaro_calculate_similarity,
    jaro_common_char_filter,
    jaro_length_filter,
)
from .sequences import common_prefix_length

_MAXIMUM = 1.0


def _trim_to_bounds(
    pattern: Sequence[Hashable], text: Sequence[Hashable]
) -> tuple[Sequence[Hashable], Sequence[Hashable], int]:
    """Return the matching window and drop the tail that can never fall inside it."""
    p_len, t_len = len(pattern), len(text)
    if t_len > p_len:
        bound = t_len // 2 - 1
        if t_len > p_len + bound:
            text = text[: p_len + bound]
    else:
        bound = p_len // 2 - 1
        if p_len > t_len + bound:
            pattern = pattern[: t_len + bound]
    return pattern, text, bound


def _similarity(pattern: Sequence[Hashable], text: Sequence[Hashable], score_cutoff: float) -> float:
    p_len, t_len = len(pattern), len(text)

    if score_cutoff > 1.0:
        return 0.0
    if not p_len and not t_len:
        return 1.0
    if not jaro_length_filter(p_len, t_len, score_cutoff):
        return 0.0
    if p_len == 1 and t_len == 1:
        return float(pattern[0] == text[0])

    pattern, text, bound = _trim_to_bounds(pattern, text)

    # a common prefix never holds transpositions
    prefix = common_prefix_length(pattern, text)
    pattern = pattern[prefix:]
    text = text[prefix:]
    common_chars = prefix
    transpositions = 0

    if pattern and text:
        flagged = flag_similar_characters(pattern, text, bound)
        common_chars += flagged.common_chars
        if not jaro_common_char_filter(p_len, t_len, common_chars, score_cutoff):
            return 0.0
        transpositions = count_transpositions(pattern, text, flagged)

    sim = jaro_calculate_similarity(p_len, t_len, common_chars, transpositions)
    return sim if sim >= score_cutoff else 0.0


def _distance(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float) -> float:
    cutoff_similarity = _MAXIMUM - score_cutoff if _MAXIMUM >= score_cutoff else 0.0
    dist = _MAXIMUM - _similarity(s1, s2, cutoff_similarity)
    return dist if dist <= score_cutoff else 1.0


def _normalized_distance(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float) -> float:
    norm_dist = _distance(s1, s2, _MAXIMUM * score_cutoff) / _MAXIMUM
    return norm_dist if norm_dist <= score_cutoff else 1.0


def _normalized_similarity(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float) -> float:
    norm_sim = 1.0 - _normalized_distance(s1, s2, 1.0 - score_cutoff)
    return norm_sim if norm_sim >= score_cutoff else 0.0


def jaro_similarity(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 0.0) -> float:
    """Jaro similarity in 0..1; 0.0 when below score_cutoff."""
    return _similarity(s1, s2, score_cutoff)


def jaro_distance(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 1.0) -> float:
    """One minus the Jaro similarity; 1.0 when above score_cutoff."""
    return _distance(s1, s2, score_cutoff)


def jaro_normalized_similarity(
    s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 0.0
) -> float:
    """Jaro similarity, already normalized to 0..1."""
    return _normalized_similarity(s1, s2, score_cutoff)


def jaro_normalized_distance(
    s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 1.0
) -> float:
    """Jaro distance, already normalized to 0..1."""
    return _normalized_distance(s1, s2, score_cutoff)


class CachedJaro:
    """Jaro scorer holding the first sequence for repeated comparisons."""

    def __init__(self, s1: Sequence[Hashable]) -> None:
        self.s1 = s1

    def similarity(self, s2: Sequence[Hashable], score_cutoff: float = 0.0) -> float:
        """Jaro similarity with s2; 0.0 when below score_cutoff."""
        return _similarity(self.s1, s2, score_cutoff)

    def distance(self, s2: Sequence[Hashable], score_cutoff: float = 1.0) -> float:
        """Jaro distance to s2; 1.0 when above score_cutoff."""
        return _distance(self.s1, s2, score_cutoff)

    def normalized_similarity(self, s2: Sequence[Hashable], score_cutoff: float = 0.0) -> float:
        """Normalized Jaro similarity with s2."""
        return _normalized_similarity(self.s1, s2, score_cutoff)

    def normalized_distance(self, s2: Sequence[Hashable], score_cutoff: float = 1.0) -> float:
        """Normalized Jaro distance to s2."""
        return _normalized_distance(self.s1, s2, score_cutoff)