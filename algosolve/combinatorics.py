"""Counting problems: orderings, games, records and arrays."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Sequence
from functools import cache

MOD = 1_000_000_007


def lexical_order(n: int) -> list[int]:
    """The numbers 1..n in dictionary order of their decimal forms."""
    result = []
    current = 1
    for _ in range(n):
        result.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            if current >= n:
                current //= 10
            current += 1
            while current % 10 == 0:
                current //= 10
    return result


def _subtree_size(n: int, first: int) -> int:
    steps = 0
    last = first + 1
    while first <= n:
        steps += min(n + 1, last) - first
        first *= 10
        last *= 10
    return steps


def find_kth_number(n: int, k: int) -> int:
    """The k-th number (from 1) of 1..n in dictionary order."""
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and n")
    current = 1
    k -= 1
    while k > 0:
        steps = _subtree_size(n, current)
        if steps <= k:
            current += 1
            k -= steps
        else:
            current *= 10
            k -= 1
    return current


def can_i_win(max_choosable: int, desired_total: int) -> bool:
    """Whether the first player can force reaching ``desired_total``.

    Players take turns picking unused numbers from 1..max_choosable; whoever
    brings the running total to at least ``desired_total`` wins.
    """
    if max_choosable * (max_choosable + 1) // 2 < desired_total:
        return False
    if desired_total <= 0:
        return True

    @cache
    def wins(used: int, remaining: int) -> bool:
        for number in range(1, max_choosable + 1):
            bit = 1 << (number - 1)
            if not used & bit and (
                number >= remaining or not wins(used | bit, remaining - number)
            ):
                return True
        return False

    return wins(0, desired_total)


def count_arrangement(n: int) -> int:
    """Number of permutations of 1..n where each value and position divide one another."""

    @cache
    def count(used: int) -> int:
        position = used.bit_count() + 1
        if position > n:
            return 1
        return sum(
            count(used | 1 << (value - 1))
            for value in range(1, n + 1)
            if not used >> (value - 1) & 1
            and (value % position == 0 or position % value == 0)
        )

    return count(0)


def check_record(n: int) -> int:
    """Attendance records of length ``n`` with under two absences and no three lates in a row."""
    if n < 0:
        raise ValueError("record length must not be negative")
    ways: dict[tuple[int, int], int] = {(0, 0): 1}
    for _ in range(n):
        following: defaultdict[tuple[int, int], int] = defaultdict(int)
        for (absent, late), count in ways.items():
            following[absent, 0] += count
            if not absent:
                following[1, 0] += count
            if late < 2:
                following[absent, late + 1] += count
        ways = {state: count % MOD for state, count in following.items()}
    return sum(ways.values()) % MOD


def count_good_arrays(n: int, m: int, k: int) -> int:
    """Arrays of length ``n`` over 1..m with exactly ``k`` equal neighbours, modulo 1e9+7."""
    if n < 1 or not 0 <= k <= n - 1:
        return 0
    choose = 1
    for i in range(k):
        choose = choose * (n - 1 - i) % MOD * pow(i + 1, MOD - 2, MOD) % MOD
    return choose * m % MOD * pow(m - 1, n - 1 - k, MOD) % MOD


def assign_edge_weights(edges: Sequence[Sequence[int]]) -> int:
    """Ways to weight the path to the deepest node with 1s and 2s so its cost is odd."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    depth = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in depth:
                depth[neighbour] = depth[node] + 1
                queue.append(neighbour)
    deepest = max(depth.values())
    if deepest == 0:
        return 0
    return pow(2, deepest - 1, MOD)


def count_permutations(complexity: Sequence[int]) -> int:
    """Orders in which computers 1..n-1 can be unlocked starting from computer 0."""
    if not complexity:
        raise ValueError("there must be at least one computer")
    first = complexity[0]
    if any(value <= first for value in complexity[1:]):
        return 0
    result = 1
    for count in range(1, len(complexity)):
        result = result * count % MOD
    return result