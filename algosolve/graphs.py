"""Union-find and breadth-first exploration."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class DisjointSet:
    """Union-find over ``0..size-1`` whose representative is the smallest member."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> None:
        """Join the sets holding ``a`` and ``b``."""
        x, y = self.find(a), self.find(b)
        if x > y:
            self._parent[x] = y
        else:
            self._parent[y] = x


def _letter_index(ch: str) -> int:
    index = ord(ch) - ord("a")
    if not 0 <= index < 26:
        raise ValueError(f"not a lowercase letter: {ch!r}")
    return index


def smallest_equivalent_string(s1: str, s2: str, base_str: str) -> str:
    """Replace each letter of ``base_str`` by the smallest letter equivalent to it."""
    letters = DisjointSet(26)
    for a, b in zip(s1, s2, strict=True):
        letters.union(_letter_index(a), _letter_index(b))
    return "".join(chr(ord("a") + letters.find(_letter_index(ch))) for ch in base_str)


def max_candies(
    status: Sequence[int],
    candies: Sequence[int],
    keys: Sequence[Sequence[int]],
    contained_boxes: Sequence[Sequence[int]],
    initial_boxes: Sequence[int],
) -> int:
    """Total candies collected by opening every box that can be reached and unlocked."""
    has_key: set[int] = set()
    has_box: set[int] = set()
    opened: set[int] = set()
    queue: deque[int] = deque()
    for box in initial_boxes:
        has_box.add(box)
        if status[box]:
            queue.append(box)

    total = 0
    while queue:
        box = queue.popleft()
        if box in opened:
            continue
        opened.add(box)
        total += candies[box]
        for key in keys[box]:
            has_key.add(key)
            if key in has_box and key not in opened:
                queue.append(key)
        for inner in contained_boxes[box]:
            has_box.add(inner)
            if status[inner] or inner in has_key:
                queue.append(inner)
    return total