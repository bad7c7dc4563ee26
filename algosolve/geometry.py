"""Points on lines, city skylines and ranges over several sorted lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from math import gcd

from sortedcontainers import SortedList


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Largest number of the given points that lie on one straight line."""
    if not points:
        return 0
    best = 1
    for i, (x0, y0) in enumerate(points):
        slopes: Counter[tuple[int, int]] = Counter()
        same = 0
        for x1, y1 in points[i + 1 :]:
            dx, dy = x1 - x0, y1 - y0
            if dx == 0 and dy == 0:
                same += 1
                continue
            g = gcd(dx, dy)
            dx, dy = dx // g, dy // g
            if dx < 0 or (dx == 0 and dy < 0):
                dx, dy = -dx, -dy
            slopes[dx, dy] += 1
        best = max(best, max(slopes.values(), default=0) + same + 1)
    return best


def skyline(buildings: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Key points ``(x, height)`` of the outline of ``(left, right, height)`` buildings."""
    events = []
    for left, right, height in buildings:
        if height <= 0 or left >= right:
            raise ValueError("a building needs a positive height and width")
        events.append((left, -height))
        events.append((right, height))
    events.sort()

    active: SortedList = SortedList()
    points: list[tuple[int, int]] = []
    for x, signed in events:
        height = abs(signed)
        if signed < 0:
            if not active or height > active[-1]:
                points.append((x, height))
            active.add(height)
        else:
            top = active[-1]
            active.remove(height)
            if height == top and (not active or active[-1] < height):
                points.append((x, active[-1] if active else 0))
    return points


def smallest_range(nums: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Narrowest range ``(low, high)`` that holds a value from every sorted list."""
    if not nums or any(not values for values in nums):
        raise ValueError("every list must hold at least one value")
    window: SortedList = SortedList(
        (values[0], index, 0) for index, values in enumerate(nums)
    )
    best: tuple[int, int] | None = None
    while True:
        low, index, position = window[0]
        high = window[-1][0]
        if best is None or high - low < best[1] - best[0]:
            best = (low, high)
        elif high - low == best[1] - best[0] and low < best[0]:
            best = (low, high)
        window.pop(0)
        if position + 1 == len(nums[index]):
            return best
        window.add((nums[index][position + 1], index, position + 1))