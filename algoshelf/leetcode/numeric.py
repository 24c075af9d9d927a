"""Integer problems bounded by the signed 32-bit range."""

from __future__ import annotations

import re
from collections.abc import Callable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI = re.compile(r" *([+-]?)([0-9]*)")


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_power_of_three(n: int) -> bool:
    """Whether ``n`` is a positive power of three."""
    if n < 1:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def reverse_integer(x: int) -> int:
    """``x`` with its digits reversed, keeping the sign; 0 if that overflows 32 bits."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT_MIN <= result <= INT_MAX else 0


def my_atoi(s: str) -> int:
    """Leading integer of ``s`` after spaces and an optional sign, clamped to 32 bits."""
    match = _ATOI.match(s)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n.

    ``guess(num)`` returns -1 if ``num`` is higher than the pick, 1 if it is
    lower, and 0 if it is the pick.
    """
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer > 0:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"no number in 1..{n} satisfies the guess function")