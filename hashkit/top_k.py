"""Most frequent values of a sequence."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def top_k_frequent(nums: Iterable[T], k: int) -> list[T]:
    """Return the k most frequent values, most frequent first.

    Values with equal frequency are ordered from largest to smallest.
    Raises ValueError if k is negative or exceeds the number of distinct values.
    """
    counts = Counter(nums)
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if k > len(counts):
        raise ValueError(f"k={k} exceeds the {len(counts)} distinct values present")
    best = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in best]