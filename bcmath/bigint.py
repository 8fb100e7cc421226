"""Big-integer helpers with truncating semantics.

Python's int is the arbitrary-precision primitive. Its // and % operators
floor toward negative infinity, while bcmath truncates toward zero. The
helpers here provide the truncating variants; everything else (add, multiply,
abs) is used on int directly.

int() and str() refuse to convert values beyond sys.get_int_max_str_digits()
(4300 digits by default). from_digits and to_digits convert in blocks below
that limit so operands and results of any length round-trip.

Examples:
    Python:  -7 // 3 = -3,  -7 % 3 = 2
    bcmath:  div_trunc(-7, 3) = -2,  rem_trunc(-7, 3) = -1
"""

from __future__ import annotations

__all__ = [
    "div_trunc",
    "rem_trunc",
    "compare",
    "pow_mod_trunc",
    "from_digits",
    "to_digits",
]

# Largest digit count converted in one int()/str() call
_BLOCK_DIGITS = 4000
_BLOCK_LIMIT = 10**_BLOCK_DIGITS


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Raises:
        ZeroDivisionError: If b is zero
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    # Same sign: result is non-negative, so floor and truncate agree.
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def rem_trunc(a: int, b: int) -> int:
    """Remainder of truncating division; takes the sign of the dividend."""
    return a - b * div_trunc(a, b)


def compare(a: int, b: int) -> int:
    """Three-way comparison: -1, 0 or 1."""
    return (a > b) - (a < b)


def pow_mod_trunc(base: int, exponent: int, modulus: int) -> int:
    """Modular exponentiation whose remainder follows the sign of base**exponent.

    modulus must be positive and exponent non-negative. Python's three-argument
    pow() returns the floored remainder, so the sign is reapplied afterwards.
    """
    r = pow(abs(base), exponent, modulus)
    if base < 0 and exponent % 2 == 1:
        return -r
    return r


def from_digits(digits: str) -> int:
    """Parse a string of ASCII digits of any length; "" is 0."""
    if len(digits) <= _BLOCK_DIGITS:
        return int(digits) if digits else 0
    half = len(digits) // 2
    return from_digits(digits[:-half]) * 10**half + from_digits(digits[-half:])


def to_digits(value: int) -> str:
    """Decimal digits of a non-negative int of any size."""
    if value < _BLOCK_LIMIT:
        return str(value)
    # Upper bound on the digit count: log10(2) < 0.30103
    half = (value.bit_length() * 30103 // 100000 + 1) // 2
    high, low = divmod(value, 10**half)
    return to_digits(high) + to_digits(low).rjust(half, "0")
