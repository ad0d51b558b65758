"""Prefix and postfix similarity metrics."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from .sequences import common_prefix_length, common_suffix_length

_Measure = Callable[[Sequence, Sequence], int]


def _maximum(s1: Sequence, s2: Sequence) -> int:
    return max(len(s1), len(s2))


def _similarity(measure: _Measure, s1: Sequence, s2: Sequence, score_cutoff: int) -> int:
    sim = measure(s1, s2)
    return sim if sim >= score_cutoff else 0


def _distance(measure: _Measure, s1: Sequence, s2: Sequence, score_cutoff: Optional[int]) -> int:
    dist = _maximum(s1, s2) - measure(s1, s2)
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def _normalized_distance(measure: _Measure, s1: Sequence, s2: Sequence, score_cutoff: float) -> float:
    maximum = _maximum(s1, s2)
    dist = maximum - measure(s1, s2)
    norm_dist = dist / maximum if maximum else 0.0
    return norm_dist if norm_dist <= score_cutoff else 1.0


def _normalized_similarity(measure: _Measure, s1: Sequence, s2: Sequence, score_cutoff: float) -> float:
    maximum = _maximum(s1, s2)
    dist = maximum - measure(s1, s2)
    norm_sim = 1.0 - (dist / maximum if maximum else 0.0)
    return norm_sim if norm_sim >= score_cutoff else 0.0


def prefix_similarity(s1: Sequence, s2: Sequence, score_cutoff: int = 0) -> int:
    """Length of the common prefix, or 0 if below score_cutoff."""
    return _similarity(common_prefix_length, s1, s2, score_cutoff)


def prefix_distance(s1: Sequence, s2: Sequence, score_cutoff: Optional[int] = None) -> int:
    """Longer length minus common prefix; score_cutoff + 1 when above the cutoff."""
    return _distance(common_prefix_length, s1, s2, score_cutoff)


def prefix_normalized_distance(s1: Sequence, s2: Sequence, score_cutoff: float = 1.0) -> float:
    """Prefix distance scaled to 0..1; 1.0 when above score_cutoff."""
    return _normalized_distance(common_prefix_length, s1, s2, score_cutoff)


def prefix_normalized_similarity(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Prefix similarity scaled to 0..1; 0.0 when below score_cutoff."""
    return _normalized_similarity(common_prefix_length, s1, s2, score_cutoff)


def postfix_similarity(s1: Sequence, s2: Sequence, score_cutoff: int = 0) -> int:
    """Length of the common suffix, or 0 if below score_cutoff."""
    return _similarity(common_suffix_length, s1, s2, score_cutoff)


def postfix_distance(s1: Sequence, s2: Sequence, score_cutoff: Optional[int] = None) -> int:
    """Longer length minus common suffix; score_cutoff + 1 when above the cutoff."""
    return _distance(common_suffix_length, s1, s2, score_cutoff)


def postfix_normalized_distance(s1: Sequence, s2: Sequence, score_cutoff: float = 1.0) -> float:
    """Postfix distance scaled to 0..1; 1.0 when above score_cutoff."""
    return _normalized_distance(common_suffix_length, s1, s2, score_cutoff)


def postfix_normalized_similarity(s1: Sequence, s2: Sequence, score_cutoff: float = 0.0) -> float:
    """Postfix similarity scaled to 0..1; 0.0 when below score_cutoff."""
    return _normalized_similarity(common_suffix_length, s1, s2, score_cutoff)