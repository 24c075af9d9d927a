"""String problems: scanning, stacks, windows and two pointers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby, pairwise, zip_longest
from math import gcd

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_LOWER_VOWELS = frozenset("aeiou")
_ALL_VOWELS = frozenset("aeiouAEIOU")
_CLOSERS = {")": "(", "]": "[", "}": "{"}


def gcd_of_strings(str1: str, str2: str) -> str:
    """Longest string that both inputs are made of repeated copies of, or ``""``."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: gcd(len(str1), len(str2))]


def roman_to_int(s: str) -> int:
    """Value of the Roman numeral ``s``."""
    try:
        values = [_ROMAN[c] for c in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    if not values:
        raise ValueError("empty Roman numeral")
    return sum(-a if a < b else a for a, b in pairwise(values)) + values[-1]


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("at least one string is required")
    base, rest = strs[0], strs[1:]
    for k, ch in enumerate(base):
        if any(k >= len(other) or other[k] != ch for other in rest):
            return base[:k]
    return base


def max_vowels(s: str, k: int) -> int:
    """Most lowercase vowels found in any window of length ``k``."""
    if k < 1:
        raise ValueError(f"window length must be positive, got {k}")
    window = sum(c in _LOWER_VOWELS for c in s[:k])
    best = window
    for outgoing, incoming in zip(s, s[k:]):
        window += (incoming in _LOWER_VOWELS) - (outgoing in _LOWER_VOWELS)
        best = max(best, window)
    return best


def reverse_words(s: str) -> str:
    """The space-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def merge_alternately(word1: str, word2: str) -> str:
    """Characters of both words interleaved, the longer word's tail appended."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def is_valid_brackets(s: str) -> bool:
    """Whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for c in s:
        if stack and stack[-1] == _CLOSERS.get(c):
            stack.pop()
        else:
            stack.append(c)
    return not stack


def largest_good_integer(num: str) -> str:
    """Largest three-digit run of one repeated digit in ``num``, or ``""``."""
    best = max(
        (digit for digit, run in groupby(num) if sum(1 for _ in run) >= 3),
        default=None,
    )
    return best * 3 if best is not None else ""


def remove_stars(s: str) -> str:
    """Apply each ``*`` as a deletion of the nearest kept character to its left."""
    kept: list[str] = []
    for c in s:
        if c == "*":
            if not kept:
                raise ValueError("a star has no character to remove")
            kept.pop()
        else:
            kept.append(c)
    return "".join(kept)


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for j, c in enumerate(s):
        if last_seen.get(c, -1) >= start:
            start = last_seen[c] + 1
        last_seen[c] = j
        best = max(best, j - start + 1)
    return best


def reverse_vowels(s: str) -> str:
    """``s`` with its vowels, of either case, in reverse order."""
    chars = list(s)
    positions = [i for i, c in enumerate(s) if c in _ALL_VOWELS]
    for i, j in zip(positions, reversed(positions)):
        chars[i] = s[j]
    return "".join(chars)


def is_subsequence(s: str, t: str) -> bool:
    """Whether ``s`` can be read from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(c in remaining for c in s)