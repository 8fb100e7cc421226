"""Basic arithmetic on validated decimal numbers.

All functions take DecimalNumber operands and an explicit, already validated
scale. Operands are aligned to a common number of fractional digits, turned
into unscaled integers, combined with integer arithmetic and rendered by
format_number. Results are truncated to the scale, never rounded.
"""

from __future__ import annotations

from bcmath.bigint import compare, div_trunc, rem_trunc
from bcmath.errors import DivisionByZeroError
from bcmath.formatting import format_number, zero
from bcmath.number import DecimalNumber

__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "comp",
]


def _common_pad(x: DecimalNumber, y: DecimalNumber) -> int:
    """Fraction length both operands are aligned to."""
    return max(x.natural_scale, y.natural_scale)


def add(x: DecimalNumber, y: DecimalNumber, scale: int) -> str:
    """Sum of x and y, truncated to ``scale`` fractional digits."""
    pad = _common_pad(x, y)
    return format_number(x.unscaled(pad) + y.unscaled(pad), scale, pad)


def sub(x: DecimalNumber, y: DecimalNumber, scale: int) -> str:
    """Difference x - y, truncated to ``scale`` fractional digits."""
    pad = _common_pad(x, y)
    return format_number(x.unscaled(pad) - y.unscaled(pad), scale, pad)


def mul(x: DecimalNumber, y: DecimalNumber, scale: int) -> str:
    """Product of x and y, truncated to ``scale`` fractional digits.

    The exact product carries len(x.fraction) + len(y.fraction) fractional
    digits before truncation.
    """
    if x.is_zero or y.is_zero:
        return zero(scale)

    magnitude = abs(x.unscaled(x.natural_scale)) * abs(y.unscaled(y.natural_scale))
    value = -magnitude if x.negative != y.negative else magnitude
    return format_number(value, scale, x.natural_scale + y.natural_scale)


def div(x: DecimalNumber, y: DecimalNumber, scale: int) -> str:
    """Quotient x / y with exactly ``scale`` correct (truncated) fractional digits.

    Raises:
        DivisionByZeroError: If y is zero
    """
    if y.is_zero:
        raise DivisionByZeroError("Division by zero")

    pad = _common_pad(x, y)
    quotient = div_trunc(x.unscaled(pad) * 10**scale, y.unscaled(pad))
    return format_number(quotient, scale, scale)


def mod(x: DecimalNumber, y: DecimalNumber, scale: int) -> str:
    """Remainder of truncating division: x - y * trunc(x / y).

    The result takes the sign of the dividend.

    Raises:
        DivisionByZeroError: If y is zero
    """
    if y.is_zero:
        raise DivisionByZeroError("Modulo by zero")

    pad = _common_pad(x, y)
    return format_number(rem_trunc(x.unscaled(pad), y.unscaled(pad)), scale, pad)


def comp(x: DecimalNumber, y: DecimalNumber, scale: int) -> int:
    """Compare x and y considering only ``scale`` fractional digits.

    Digits beyond the scale are truncated, not rounded, so
    comp("1.0001", "1", 3) == 0.

    Returns:
        -1 if x < y, 0 if equal, 1 if x > y
    """
    digits = min(scale, _common_pad(x, y))
    return compare(x.unscaled(digits), y.unscaled(digits))
