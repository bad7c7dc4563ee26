"""Searching, counting and sorting over integer sequences."""

from __future__ import annotations

import heapq
import math
import operator
from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate

from sortedcontainers import SortedSet


def median_of_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Return the median of two sorted sequences taken together."""
    if len(a) > len(b):
        a, b = b, a
    n1, n2 = len(a), len(b)
    total = n1 + n2
    if total == 0:
        raise ValueError("median of empty data")
    left_size = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        mid1 = (low + high) // 2
        mid2 = left_size - mid1
        l1 = a[mid1 - 1] if mid1 > 0 else -math.inf
        l2 = b[mid2 - 1] if mid2 > 0 else -math.inf
        r1 = a[mid1] if mid1 < n1 else math.inf
        r2 = b[mid2] if mid2 < n2 else math.inf
        if l1 <= r2 and l2 <= r1:
            if total % 2:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2
        if l1 > r2:
            high = mid1 - 1
        else:
            low = mid1 + 1
    raise ValueError("inputs must be sorted")


def k_weakest_rows(mat: Sequence[Sequence[int]], k: int) -> list[int]:
    """Return the indices of the ``k`` rows with the fewest leading ones."""
    if not 0 <= k <= len(mat):
        raise ValueError("k must be between 0 and the number of rows")
    strengths = sorted(
        (bisect_left(row, 0, key=operator.neg), index) for index, row in enumerate(mat)
    )
    return [index for _, index in strengths[:k]]


def minimize_max(nums: Sequence[int], p: int) -> int:
    """Smallest possible largest difference over ``p`` disjoint pairs."""
    if len(nums) <= 1:
        return 0
    ordered = sorted(nums)

    def feasible(limit: int) -> bool:
        pairs = 0
        i = 1
        while i < len(ordered):
            if ordered[i] - ordered[i - 1] <= limit:
                pairs += 1
                i += 2
            else:
                i += 1
        return pairs >= p

    low, high = 0, ordered[-1] - ordered[0]
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def contains_nearby_almost_duplicate(nums: Sequence[int], k: int, t: int) -> bool:
    """Tell whether two values at most ``k`` apart differ by at most ``t``."""
    if k < 0:
        raise ValueError("index distance must not be negative")
    window = SortedSet()
    for i, value in enumerate(nums):
        pos = window.bisect_left(value - t)
        if pos < len(window) and window[pos] <= value + t:
            return True
        window.add(value)
        if i >= k:
            window.discard(nums[i - k])
    return False


def count_range_sum(nums: Sequence[int], lower: int, upper: int) -> int:
    """Count the subarrays whose sum lies in ``[lower, upper]``."""

    def sort_and_count(sums: list[int]) -> tuple[list[int], int]:
        if len(sums) <= 1:
            return sums, 0
        mid = len(sums) // 2
        left, left_count = sort_and_count(sums[:mid])
        right, right_count = sort_and_count(sums[mid:])
        total = left_count + right_count
        lo = hi = 0
        for start in left:
            while lo < len(right) and right[lo] - start < lower:
                lo += 1
            while hi < len(right) and right[hi] - start <= upper:
                hi += 1
            total += hi - lo
        return list(heapq.merge(left, right)), total

    return sort_and_count(list(accumulate(nums, initial=0)))[1]


def merge_sort(nums: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``nums`` using merge sort."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return list(heapq.merge(merge_sort(items[:mid]), merge_sort(items[mid:])))