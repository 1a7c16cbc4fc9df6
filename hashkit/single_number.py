"""Find the one value that is not paired."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice.

    Works by XOR-ing all values together; an empty input gives 0.
    """
    return reduce(xor, nums, 0)