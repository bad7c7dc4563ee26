"""Choosing seats as far as possible from everyone already seated."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from sortedcontainers import SortedList


def max_dist_to_closest(seats: Sequence[int]) -> int:
    """Largest distance to the nearest occupied seat that an empty seat can give.

    ``seats`` holds 1 for an occupied seat and 0 for an empty one.
    """
    occupied = [index for index, seat in enumerate(seats) if seat == 1]
    if not occupied:
        raise ValueError("at least one seat must be occupied")
    middle = max(((b - a) // 2 for a, b in pairwise(occupied)), default=0)
    return max(occupied[0], len(seats) - 1 - occupied[-1], middle)


class ExamRoom:
    """A row of ``n`` seats where each newcomer sits furthest from the others."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a room needs at least one seat")
        self.n = n
        self._seats: SortedList = SortedList()

    def seat(self) -> int:
        """Seat a student and return the chosen position (lowest on ties)."""
        if len(self._seats) == self.n:
            raise RuntimeError("the room is full")
        if not self._seats:
            position = 0
        else:
            best, position = self._seats[0], 0
            for a, b in pairwise(self._seats):
                gap = (b - a) // 2
                if gap > best:
                    best, position = gap, a + gap
            if self.n - 1 - self._seats[-1] > best:
                position = self.n - 1
        self._seats.add(position)
        return position

    def leave(self, p: int) -> None:
        """Free seat ``p``."""
        self._seats.discard(p)