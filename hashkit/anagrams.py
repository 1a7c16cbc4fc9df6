"""Anagram detection and grouping."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable
from string import ascii_lowercase

_ALPHABET_SIZE = len(ascii_lowercase)


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another.

    Groups are ordered by their sorted-letter key; within a group, words keep
    their input order.
    """
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def is_anagram(s: str, t: str) -> bool:
    """Return True if both strings hold the same characters with the same counts."""
    return Counter(s) == Counter(t)


def is_anagram_sorted(s: str, t: str) -> bool:
    """Return True if both strings are equal once their characters are sorted."""
    return sorted(s) == sorted(t)


def _letter_index(ch: str) -> int:
    index = ord(ch) - ord("a")
    if not 0 <= index < _ALPHABET_SIZE:
        raise ValueError(f"character {ch!r} is not a lowercase ASCII letter")
    return index


def is_anagram_lowercase(s: str, t: str) -> bool:
    """Anagram check over lowercase ASCII letters using a fixed table of counts.

    Raises ValueError if either string holds any other character.
    """
    counts = [0] * _ALPHABET_SIZE
    for ch in s:
        counts[_letter_index(ch)] += 1
    for ch in t:
        counts[_letter_index(ch)] -= 1
    return not any(counts)