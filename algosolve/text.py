"""String algorithms: matching, justification, palindromes and brackets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import accumulate


def prefix_function(pattern: str) -> list[int]:
    """For each position, the length of the longest proper border of the prefix."""
    lps = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = lps[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def _pack(words: Sequence[str], width: int) -> Iterator[list[str]]:
    line: list[str] = []
    letters = 0
    for word in words:
        if line and letters + len(line) + len(word) > width:
            yield line
            line, letters = [], 0
        line.append(word)
        letters += len(word)
    if line:
        yield line


def _justify(line: list[str], width: int) -> str:
    if len(line) == 1:
        return line[0].ljust(width)
    base, extra = divmod(width - sum(map(len, line)), len(line) - 1)
    parts = [line[0]]
    for index, word in enumerate(line[1:]):
        parts.append(" " * (base + (index < extra)) + word)
    return "".join(parts)


def full_justify(words: Sequence[str], width: int) -> list[str]:
    """Lay out ``words`` in fully justified lines of exactly ``width`` characters."""
    if any(len(word) > width for word in words):
        raise ValueError("a word is longer than the line width")
    lines = list(_pack(words, width))
    if not lines:
        return []
    body = [_justify(line, width) for line in lines[:-1]]
    return body + [" ".join(lines[-1]).ljust(width)]


def shortest_palindrome(s: str) -> str:
    """Shortest palindrome made by adding characters in front of ``s``."""
    if not s:
        return s
    lps = prefix_function(s)
    matched = 0
    for ch in reversed(s):
        while matched and ch != s[matched]:
            matched = lps[matched - 1]
        if ch == s[matched]:
            matched += 1
    return s[::-1][: len(s) - matched] + s


def repeated_string_match(a: str, b: str) -> int:
    """Fewest repetitions of ``a`` that contain ``b``, or -1 if none does."""
    if not a:
        raise ValueError("the repeated string must not be empty")
    count = max(1, -(-len(b) // len(a)))
    if b in a * count:
        return count
    if b in a * (count + 1):
        return count + 1
    return -1


def rotate_string(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rotation of ``s``."""
    return len(s) == len(t) and t in s + s


def _greedy_border(s: str) -> int:
    matched, j = 0, 1
    border = 0
    while j < len(s):
        if s[matched] == s[j]:
            matched += 1
            j += 1
            if j == len(s):
                border = matched
        elif matched == 0:
            j += 1
        else:
            matched = 0
    return border


def longest_prefix(s: str) -> str:
    """Longest proper prefix of ``s`` that is also a suffix."""
    if not s:
        return ""
    return s[: max(_greedy_border(s), _greedy_border(s[::-1]))]


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from every primitive bracket group."""
    result = []
    depth = 0
    for ch in s:
        if ch == "(":
            if depth > 0:
                result.append(ch)
            depth += 1
        else:
            depth -= 1
            if depth > 0:
                result.append(ch)
    return "".join(result)


def max_depth(s: str) -> int:
    """Deepest nesting of parentheses in ``s``."""
    steps = (1 if ch == "(" else -1 if ch == ")" else 0 for ch in s)
    return max(accumulate(steps, initial=0))