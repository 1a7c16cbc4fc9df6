"""Checks for repeated values in a sequence."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from itertools import combinations, pairwise
from typing import Any


def contains_duplicate(nums: Iterable[Hashable]) -> bool:
    """Return True if any value occurs more than once, tracking seen values in a set."""
    seen: set[Hashable] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def contains_duplicate_pairwise(nums: Iterable[Any]) -> bool:
    """Return True if any two positions hold equal values, comparing every pair."""
    return any(a == b for a, b in combinations(list(nums), 2))


def contains_duplicate_sorted(nums: Iterable[Any]) -> bool:
    """Return True if any value repeats, by sorting and comparing neighbours.

    The input is left untouched; a sorted copy is examined.
    """
    return any(a == b for a, b in pairwise(sorted(nums)))


def contains_duplicate_counting(nums: Iterable[Hashable]) -> bool:
    """Return True as soon as some value's running count would exceed one."""
    counts: dict[Hashable, int] = {}
    for num in nums:
        if counts.get(num, 0) >= 1:
            return True
        counts[num] = counts.get(num, 0) + 1
    return False