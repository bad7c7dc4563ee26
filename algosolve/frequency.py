"""Problems driven by character frequencies within strings and substrings."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, groupby, permutations


def longest_substring(s: str, k: int) -> int:
    """Length of the longest substring in which every character occurs at least ``k`` times."""
    if len(s) < k:
        return 0
    counts = Counter(s)
    rare = {ch for ch, count in counts.items() if count < k}
    if not rare:
        return len(s)
    return max(
        (
            longest_substring("".join(piece), k)
            for is_rare, piece in groupby(s, key=lambda ch: ch in rare)
            if not is_rare
        ),
        default=0,
    )


def beauty_sum(s: str) -> int:
    """Sum over all substrings of the gap between the most and least frequent character."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            total += max(counts.values()) - min(counts.values())
    return total


def minimum_deletions(word: str, k: int) -> int:
    """Fewest deletions so that any two character frequencies differ by at most ``k``."""
    freqs = sorted(Counter(word).values())
    best = None
    for index, (target, below) in enumerate(zip(freqs, accumulate(freqs, initial=0))):
        limit = target + k
        cost = below + sum(f - limit for f in freqs[index + 1 :] if f > limit)
        best = cost if best is None else min(best, cost)
    return best or 0


def max_parity_difference(s: str) -> int:
    """Largest odd character frequency minus the smallest even one."""
    counts = Counter(s).values()
    odd = [c for c in counts if c % 2]
    even = [c for c in counts if not c % 2]
    if not odd or not even:
        raise ValueError("need a character of odd and one of even frequency")
    return max(odd) - min(even)


def max_parity_difference_window(s: str, k: int) -> int:
    """Best ``freq(a) - freq(b)`` over substrings of length at least ``k``.

    In the substring ``a`` must occur an odd number of times and ``b`` an even,
    non-zero number of times.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    best: int | None = None
    for a, b in permutations(sorted(set(s)), 2):
        count_a = list(accumulate((ch == a for ch in s), initial=0))
        count_b = list(accumulate((ch == b for ch in s), initial=0))
        lowest: dict[tuple[int, int], int] = {}
        start = 0
        for end in range(k, len(s) + 1):
            while start <= end - k and count_b[start] < count_b[end]:
                key = (count_a[start] % 2, count_b[start] % 2)
                value = count_a[start] - count_b[start]
                lowest[key] = min(lowest.get(key, value), value)
                start += 1
            key = (1 - count_a[end] % 2, count_b[end] % 2)
            if key in lowest:
                candidate = count_a[end] - count_b[end] - lowest[key]
                best = candidate if best is None else max(best, candidate)
    if best is None:
        raise ValueError("no substring has a character of odd and one of even frequency")
    return best


def max_manhattan_distance(s: str, k: int) -> int:
    """Farthest Manhattan distance from the origin reached while walking ``s``.

    ``s`` holds the moves N, S, E and W, and up to ``k`` of them may be changed.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    counts: Counter[str] = Counter()
    best = 0
    for steps, move in enumerate(s, start=1):
        counts[move] += 1
        distance = abs(counts["N"] - counts["S"]) + abs(counts["E"] - counts["W"])
        best = max(best, distance + min(2 * k, steps - distance))
    return best