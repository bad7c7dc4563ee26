"""Scans, greedy groupings and small dynamic programmes over integer arrays."""

from __future__ import annotations

import math
from collections.abc import Sequence


def max_profit(prices: Sequence[int], fee: int) -> int:
    """Best trading profit when every completed sale costs ``fee``."""
    cash: float = 0
    hold: float = -math.inf
    for price in prices:
        cash, hold = max(cash, hold + price - fee), max(hold, cash - price)
    return int(cash)


def ways_to_make_fair(nums: Sequence[int]) -> int:
    """Number of indices whose removal leaves equal sums at even and odd positions."""
    right = [sum(nums[0::2]), sum(nums[1::2])]
    left = [0, 0]
    count = 0
    for index, value in enumerate(nums):
        parity = index % 2
        right[parity] -= value
        # Elements after the removed one swap parity.
        if left[0] + right[1] == left[1] + right[0]:
            count += 1
        left[parity] += value
    return count


def maximum_difference(nums: Sequence[int]) -> int:
    """Largest ``nums[j] - nums[i]`` with ``i < j`` and ``nums[i] < nums[j]``, else -1."""
    values = iter(nums)
    try:
        lowest = next(values)
    except StopIteration:
        raise ValueError("nums must not be empty") from None
    best = -1
    for value in values:
        if value > lowest:
            best = max(best, value - lowest)
        lowest = min(lowest, value)
    return best


def partition_array(nums: Sequence[int], k: int) -> int:
    """Fewest groups such that each group's largest and smallest differ by at most ``k``."""
    ordered = sorted(nums)
    if not ordered:
        raise ValueError("nums must not be empty")
    groups = 1
    start = ordered[0]
    for value in ordered:
        if value - start > k:
            groups += 1
            start = value
    return groups


def divide_array(nums: Sequence[int], k: int) -> list[list[int]]:
    """Split into sorted triples whose spread is at most ``k``; empty if impossible."""
    ordered = sorted(nums)
    groups = [ordered[i : i + 3] for i in range(0, len(ordered) - 2, 3)]
    if any(group[2] - group[0] > k for group in groups):
        return []
    return groups


def max_adjacent_distance(nums: Sequence[int]) -> int:
    """Largest absolute difference between neighbours, the array taken as a circle."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    return max(abs(a - b) for a, b in zip(values, values[1:] + values[:1]))


def _flips_to(values: Sequence[int], target: int) -> int | None:
    flips = 0
    flip = False
    for value in values[:-1]:
        current = -value if flip else value
        flip = current != target
        flips += flip
    last = -values[-1] if flip else values[-1]
    return flips if last == target else None


def can_make_equal(nums: Sequence[int], k: int) -> bool:
    """Whether at most ``k`` operations, each negating two neighbours, make all of ``nums`` equal.

    ``nums`` holds only 1 and -1.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    if any(value not in (1, -1) for value in nums):
        raise ValueError("nums may only hold 1 and -1")
    counts = [c for c in (_flips_to(nums, 1), _flips_to(nums, -1)) if c is not None]
    return bool(counts) and min(counts) <= k