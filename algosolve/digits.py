"""Digit remapping and digit-string trimming."""

from __future__ import annotations


def _check_non_negative(n: int) -> str:
    if n < 0:
        raise ValueError("number must not be negative")
    return str(n)


def max_diff(n: int) -> int:
    """Largest gap between two numbers made from ``n`` by remapping one digit each.

    The larger number turns its first non-9 digit into 9 everywhere. The smaller
    one turns its leading digit into 1, or, when it already is 1, the first later
    digit other than 0 or 1 into 0, so it never gains a leading zero.
    """
    digits = _check_non_negative(n)
    target = next((d for d in digits if d != "9"), None)
    high = digits.replace(target, "9") if target else digits
    if digits[0] != "1":
        low = digits.replace(digits[0], "1")
    else:
        target = next((d for d in digits[1:] if d not in "01"), None)
        low = digits[0] + digits[1:].replace(target, "0") if target else digits
    return int(high) - int(low)


def min_max_difference(num: int) -> int:
    """Gap between the largest and smallest numbers made by remapping one digit of ``num``.

    Leading zeros are allowed in the smaller number.
    """
    digits = _check_non_negative(num)
    target = next((d for d in digits if d != "9"), None)
    high = digits.replace(target, "9") if target else digits
    low = digits.replace(digits[0], "0")
    return int(high) - int(low)


def largest_odd_number(num: str) -> str:
    """Longest prefix of the digit string ``num`` that is an odd number."""
    return num.rstrip("02468")