"""Building blocks of the Jaro similarity: bounds, filters, flagging and transpositions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator, Sequence


@dataclass(frozen=True)
class FlaggedChars:
    """Bit sets of matched positions in the pattern and in the text."""

    p_flag: int = 0
    t_flag: int = 0

    @property
    def common_chars(self) -> int:
        """Number of characters matched between pattern and text."""
        return self.p_flag.bit_count()


def jaro_calculate_similarity(p_len: int, t_len: int, common_chars: int, transpositions: int) -> float:
    """Jaro similarity from lengths, matched characters and unhalved transpositions."""
    transpositions //= 2
    sim = common_chars / p_len
    sim += common_chars / t_len
    sim += (common_chars - transpositions) / common_chars
    return sim / 3.0


def jaro_length_filter(p_len: int, t_len: int, score_cutoff: float) -> bool:
    """Whether the lengths alone still allow a score of at least score_cutoff."""
    if not t_len or not p_len:
        return False
    min_len = min(p_len, t_len)
    sim = (min_len / p_len + min_len / t_len + 1.0) / 3.0
    return sim >= score_cutoff


def jaro_common_char_filter(p_len: int, t_len: int, common_chars: int, score_cutoff: float) -> bool:
    """Whether the matched characters still allow a score of at least score_cutoff."""
    if not common_chars:
        return False
    sim = (common_chars / p_len + common_chars / t_len + 1.0) / 3.0
    return sim >= score_cutoff


def jaro_bounds(p_len: int, t_len: int) -> int:
    """Half-width of the matching window for two sequences of these lengths."""
    bound = max(p_len, t_len) // 2
    if bound > 0:
        bound -= 1
    return bound


def _pattern_masks(pattern: Sequence[Hashable]) -> dict[Hashable, int]:
    masks: dict[Hashable, int] = {}
    for pos, ch in enumerate(pattern):
        masks[ch] = masks.get(ch, 0) | (1 << pos)
    return masks


def flag_similar_characters(
    pattern: Sequence[Hashable], text: Sequence[Hashable], bound: int
) -> FlaggedChars:
    """Match each text character to the first free equal pattern character within bound."""
    masks = _pattern_masks(pattern)
    p_flag = 0
    t_flag = 0
    for j, ch in enumerate(text):
        low = max(0, j - bound)
        window = ((1 << (j + bound + 1)) - 1) & ~((1 << low) - 1)
        candidates = masks.get(ch, 0) & window & ~p_flag
        if candidates:
            p_flag |= candidates & -candidates
            t_flag |= 1 << j
    return FlaggedChars(p_flag, t_flag)


def _set_bits(value: int) -> Iterator[int]:
    while value:
        lowest = value & -value
        yield lowest.bit_length() - 1
        value ^= lowest


def count_transpositions(
    pattern: Sequence[Hashable], text: Sequence[Hashable], flagged: FlaggedChars
) -> int:
    """Number of matched pairs, taken in order, whose characters differ (not halved)."""
    return sum(
        1
        for p_pos, t_pos in zip(_set_bits(flagged.p_flag), _set_bits(flagged.t_flag))
        if pattern[p_pos] != text[t_pos]
    )