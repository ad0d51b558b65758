"""Indel (LCS based) and Damerau-Levenshtein edit distances."""

from __future__ import annotations

from typing import Hashable, Optional, Sequence

from .sequences import remove_common_affix


def _pattern_masks(s1: Sequence[Hashable]) -> dict[Hashable, int]:
    masks: dict[Hashable, int] = {}
    for pos, ch in enumerate(s1):
        masks[ch] = masks.get(ch, 0) | (1 << pos)
    return masks


def _lcs_length(masks: dict[Hashable, int], len1: int, s2: Sequence[Hashable]) -> int:
    """Bit-parallel longest common subsequence length."""
    if not len1 or not s2:
        return 0
    full = (1 << len1) - 1
    state = full
    for ch in s2:
        u = state & masks.get(ch, 0)
        state = ((state + u) | (state - u)) & full
    return len1 - state.bit_count()


class CachedIndel:
    """Indel scorer with the first sequence preprocessed for repeated queries."""

    def __init__(self, s1: Sequence[Hashable]) -> None:
        self.s1 = s1
        self._len1 = len(s1)
        self._masks = _pattern_masks(s1)

    def _maximum(self, s2: Sequence[Hashable]) -> int:
        return self._len1 + len(s2)

    def lcs(self, s2: Sequence[Hashable]) -> int:
        """Length of the longest common subsequence with s2."""
        return _lcs_length(self._masks, self._len1, s2)

    def distance(self, s2: Sequence[Hashable], score_cutoff: Optional[int] = None) -> int:
        """Insertions plus deletions; score_cutoff + 1 when above the cutoff."""
        dist = self._maximum(s2) - 2 * self.lcs(s2)
        if score_cutoff is None or dist <= score_cutoff:
            return dist
        return score_cutoff + 1

    def similarity(self, s2: Sequence[Hashable], score_cutoff: int = 0) -> int:
        """Maximum distance minus the distance; 0 when below score_cutoff."""
        sim = self._maximum(s2) - self.distance(s2)
        return sim if sim >= score_cutoff else 0

    def normalized_distance(self, s2: Sequence[Hashable], score_cutoff: float = 1.0) -> float:
        """Distance scaled to 0..1; 1.0 when above score_cutoff."""
        maximum = self._maximum(s2)
        norm = self.distance(s2) / maximum if maximum else 0.0
        return norm if norm <= score_cutoff else 1.0

    def normalized_similarity(self, s2: Sequence[Hashable], score_cutoff: float = 0.0) -> float:
        """One minus the normalized distance; 0.0 when below score_cutoff."""
        maximum = self._maximum(s2)
        norm_sim = 1.0 - (self.distance(s2) / maximum if maximum else 0.0)
        return norm_sim if norm_sim >= score_cutoff else 0.0


def lcs_seq_similarity(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: int = 0) -> int:
    """Length of the longest common subsequence, or 0 if below score_cutoff."""
    sim = CachedIndel(s1).lcs(s2)
    return sim if sim >= score_cutoff else 0


def indel_distance(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: Optional[int] = None) -> int:
    """Minimum number of insertions and deletions turning s1 into s2."""
    return CachedIndel(s1).distance(s2, score_cutoff)


def indel_similarity(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: int = 0) -> int:
    """Combined length minus the indel distance."""
    return CachedIndel(s1).similarity(s2, score_cutoff)


def indel_normalized_distance(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 1.0) -> float:
    """Indel distance scaled to 0..1."""
    return CachedIndel(s1).normalized_distance(s2, score_cutoff)


def indel_normalized_similarity(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 0.0) -> float:
    """Indel similarity scaled to 0..1."""
    return CachedIndel(s1).normalized_similarity(s2, score_cutoff)


def _damerau_levenshtein(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    """Unrestricted Damerau-Levenshtein distance (adjacent transpositions allowed)."""
    s1, s2, _ = remove_common_affix(s1, s2)
    len1, len2 = len(s1), len(s2)
    if not len1 or not len2:
        return len1 + len2

    big = len1 + len2
    table = [[big] * (len2 + 2)]
    table.extend([big, i] + [0] * len2 for i in range(len1 + 1))
    table[0][1:] = [big] + list(range(len2 + 1))
    table[1][1:] = list(range(len2 + 1))

    last_row: dict[Hashable, int] = {}
    for i, ch1 in enumerate(s1, start=1):
        last_match_col = 0
        row_above, row = table[i], table[i + 1]
        for j, ch2 in enumerate(s2, start=1):
            k = last_row.get(ch2, 0)
            col = last_match_col
            if ch1 == ch2:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            row[j + 1] = min(
                row_above[j] + cost,
                row[j] + 1,
                row_above[j + 1] + 1,
                table[k][col] + (i - k - 1) + 1 + (j - col - 1),
            )
        last_row[ch1] = i
    return table[len1 + 1][len2 + 1]


def damerau_levenshtein_distance(
    s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: Optional[int] = None
) -> int:
    """Damerau-Levenshtein distance; score_cutoff + 1 when above the cutoff."""
    dist = _damerau_levenshtein(s1, s2)
    if score_cutoff is None or dist <= score_cutoff:
        return dist
    return score_cutoff + 1


def damerau_levenshtein_similarity(s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: int = 0) -> int:
    """Longer length minus the distance; 0 when below score_cutoff."""
    sim = max(len(s1), len(s2)) - _damerau_levenshtein(s1, s2)
    return sim if sim >= score_cutoff else 0


def damerau_levenshtein_normalized_distance(
    s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 1.0
) -> float:
    """Distance divided by the longer length; 1.0 when above score_cutoff."""
    maximum = max(len(s1), len(s2))
    norm = _damerau_levenshtein(s1, s2) / maximum if maximum else 0.0
    return norm if norm <= score_cutoff else 1.0


def damerau_levenshtein_normalized_similarity(
    s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: float = 0.0
) -> float:
    """One minus the normalized distance; 0.0 when below score_cutoff."""
    maximum = max(len(s1), len(s2))
    norm_sim = 1.0 - (_damerau_levenshtein(s1, s2) / maximum if maximum else 0.0)
    return norm_sim if norm_sim >= score_cutoff else 0.0