"""Find two positions whose values add up to a target."""

from __future__ import annotations

from collections.abc import Iterable


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return indices [i, j], i < j, with nums[i] + nums[j] == target.

    The first j for which an earlier partner exists is chosen, paired with the
    latest such earlier index. Returns an empty list if no pair exists.
    """
    index_of: dict[int, int] = {}
    for j, num in enumerate(nums):
        partner = index_of.get(target - num)
        if partner is not None:
            return [partner, j]
        index_of[num] = j
    return []