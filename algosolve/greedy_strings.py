"""Greedy constructions of lexicographically extreme strings and substring counts."""

from __future__ import annotations

from bisect import bisect_left
from collections import defaultdict
from itertools import accumulate, chain, groupby, pairwise


def robot_with_string(s: str) -> str:
    """Smallest string a robot can write by moving ``s`` through a stack."""
    suffix_min = list(accumulate(reversed(s), min))[::-1]
    stack: list[str] = []
    written: list[str] = []
    for ch, bound in zip(s, chain(suffix_min[1:], [None])):
        stack.append(ch)
        while stack and (bound is None or stack[-1] <= bound):
            written.append(stack.pop())
    return "".join(written)


def clear_stars(s: str) -> str:
    """Remove each ``*`` with the smallest letter to its left, the rightmost one on ties."""
    positions: defaultdict[str, list[int]] = defaultdict(list)
    removed: set[int] = set()
    for index, ch in enumerate(s):
        if ch == "*":
            candidates = [letter for letter, stack in positions.items() if stack]
            if candidates:
                removed.add(positions[min(candidates)].pop())
        else:
            positions[ch].append(index)
    return "".join(
        ch for index, ch in enumerate(s) if ch != "*" and index not in removed
    )


def answer_string(word: str, num_friends: int) -> str:
    """Largest piece obtainable by splitting ``word`` into ``num_friends`` non-empty parts."""
    if not 1 <= num_friends <= len(word):
        raise ValueError("num_friends must be between 1 and the word length")
    if num_friends == 1:
        return word
    width = len(word) - num_friends + 1
    return max(word[i : i + width] for i in range(len(word)))


def max_active_sections_after_trade(s: str) -> int:
    """Most ones in the binary string ``s`` after at most one trade.

    A trade turns a block of ones between zeros into zeros and then a block of
    zeros between ones into ones, which merges two neighbouring zero blocks.
    """
    if set(s) - {"0", "1"}:
        raise ValueError("s must be a binary string")
    zero_runs = [len(list(run)) for ch, run in groupby(s) if ch == "0"]
    gain = max((a + b for a, b in pairwise(zero_runs)), default=0)
    return s.count("1") + gain


def max_substrings(word: str) -> int:
    """Most disjoint substrings of length at least 4 that start and end with the same letter."""
    positions: defaultdict[str, list[int]] = defaultdict(list)
    for index, ch in enumerate(word):
        positions[ch].append(index)
    count = 0
    end_of_last = -1
    for index, ch in enumerate(word):
        indices = positions[ch]
        found = bisect_left(indices, index + 3)
        if found == len(indices):
            continue
        end = indices[found]
        if index > end_of_last:
            count += 1
            end_of_last = end
        else:
            end_of_last = min(end_of_last, end)
    return count