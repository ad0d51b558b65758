"""Sequence helpers: whitespace tests, token splitting and affix handling."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby, takewhile
from typing import NamedTuple, Sequence, TypeVar

T = TypeVar("T", bound=Sequence)

# Characters with bidirectional type WS, B or S, or category Zs.
_SPACE_CODES = frozenset(
    {
        0x0009, 0x000A, 0x000B, 0x000C, 0x000D,
        0x001C, 0x001D, 0x001E, 0x001F, 0x0020,
        0x0085, 0x00A0, 0x1680,
        0x2000, 0x2001, 0x2002, 0x2003, 0x2004, 0x2005,
        0x2006, 0x2007, 0x2008, 0x2009, 0x200A,
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
    }
)


def is_space(ch: str | int) -> bool:
    """Return True if a character (or code point) counts as a word separator."""
    code = ord(ch) if isinstance(ch, str) else ch
    return code in _SPACE_CODES


def sorted_split(text: str) -> list[str]:
    """Split text on whitespace, drop empty pieces and return the words sorted."""
    words = ["".join(group) for spaced, group in groupby(text, key=is_space) if not spaced]
    return sorted(words)


class DecomposedSet(NamedTuple):
    """Words only in the first set, only in the second, and in both."""

    difference_ab: list[str]
    difference_ba: list[str]
    intersection: list[str]


def set_decomposition(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> DecomposedSet:
    """Split two token lists into their differences and intersection.

    Duplicates are removed first; the order of the input lists is kept.
    """
    words_a = list(dict.fromkeys(tokens_a))
    difference_ba = list(dict.fromkeys(tokens_b))
    intersection: list[str] = []
    difference_ab: list[str] = []

    for word in words_a:
        if word in difference_ba:
            difference_ba.remove(word)
            intersection.append(word)
        else:
            difference_ab.append(word)

    return DecomposedSet(difference_ab, difference_ba, intersection)


def common_prefix_length(s1: Sequence, s2: Sequence) -> int:
    """Length of the longest common prefix of two sequences."""
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(s1, s2)))


def common_suffix_length(s1: Sequence, s2: Sequence) -> int:
    """Length of the longest common suffix of two sequences."""
    return common_prefix_length(s1[::-1], s2[::-1])


@dataclass(frozen=True)
class StringAffix:
    """Lengths of a removed common prefix and suffix."""

    prefix_len: int
    suffix_len: int


def remove_common_affix(s1: T, s2: T) -> tuple[T, T, StringAffix]:
    """Strip the common prefix, then the common suffix, from both sequences."""
    prefix = common_prefix_length(s1, s2)
    rest1 = s1[prefix:]
    rest2 = s2[prefix:]
    suffix = common_suffix_length(rest1, rest2)
    if suffix:
        rest1 = rest1[: len(rest1) - suffix]
        rest2 = rest2[: len(rest2) - suffix]
    return rest1, rest2, StringAffix(prefix, suffix)