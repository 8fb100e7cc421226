"""Digit-by-digit square root.

The classic decimal long-division method: the radicand is split into
two-digit groups around the decimal point and one result digit is produced
per group. Each step picks the largest digit x with x * (20p + x) <= c, where
p is the root found so far and c the running remainder. The result is
truncated, never rounded.

See https://en.wikipedia.org/wiki/Methods_of_computing_square_roots#Decimal_(base_10)
"""

from __future__ import annotations

from math import isqrt

import structlog

from bcmath.errors import NegativeSqrtArgument, ScaleTooLarge
from bcmath.formatting import zero
from bcmath.number import DecimalNumber

__all__ = ["sqrt", "digit_groups"]

logger = structlog.get_logger()


def digit_groups(digits: str) -> list[int]:
    """Split an even-length digit string into two-digit integers."""
    return [int(digits[i : i + 2]) for i in range(0, len(digits), 2)]


def _next_digit(p: int, c: int) -> int:
    """Largest x in [0, 9] with x * (20p + x) <= c."""
    if p == 0:
        return min(isqrt(c), 9)
    # x <= c / 20p, so start there and step down
    x = min(c // (20 * p), 9)
    while x * (20 * p + x) > c:
        x -= 1
    return x


def sqrt(number: DecimalNumber, scale: int, max_scale: int) -> str:
    """Square root of a non-negative number, truncated to ``scale`` digits.

    Args:
        number: The radicand
        scale: Fractional digits in the result
        max_scale: Largest scale accepted; the digit loop is linear in scale

    Raises:
        NegativeSqrtArgument: If number is below zero
        ScaleTooLarge: If scale exceeds max_scale
    """
    if number.is_zero:
        return zero(scale)
    if number.negative:
        raise NegativeSqrtArgument(
            "bcsqrt(): Argument #1 ($num) must be greater than or equal to 0"
        )
    if scale > max_scale:
        logger.debug("sqrt_guard_rejected", scale=scale, max_scale=max_scale)
        raise ScaleTooLarge(
            f"bcsqrt(): Argument #2 ($scale) exceeds the configured limit of {max_scale}"
        )

    integer = number.integer.lstrip("0")
    fraction = number.fraction.rstrip("0")
    if len(integer) % 2:
        integer = "0" + integer
    if len(fraction) % 2:
        fraction += "0"

    integer_groups = len(integer) // 2
    groups = digit_groups(integer + fraction)
    steps = integer_groups + scale

    root: list[str] = []
    p = 0
    c = 0
    for i in range(steps):
        c = 100 * c + (groups[i] if i < len(groups) else 0)
        x = _next_digit(p, c)
        c -= x * (20 * p + x)
        p = 10 * p + x
        root.append(str(x))
        # Exact root found and nothing left to consume
        if c == 0 and i + 1 >= integer_groups and i + 1 >= len(groups):
            break

    integer_digits = "".join(root[:integer_groups]) or "0"
    fraction_digits = "".join(root[integer_groups:]).ljust(scale, "0")
    if scale:
        return f"{integer_digits}.{fraction_digits}"
    return integer_digits
