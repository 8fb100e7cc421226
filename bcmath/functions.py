"""PHP-style module functions backed by the default calculator.

These mirror the bcmath function names and argument order so existing call
sites translate one to one. The default scale they share lives on
get_default_calculator(); pass a scale explicitly, or use a dedicated
Calculator, to avoid depending on it.
"""

from __future__ import annotations

from bcmath.calculator import get_default_calculator
from bcmath.rounding import RoundingMode

__all__ = [
    "bcadd",
    "bcsub",
    "bcmul",
    "bcdiv",
    "bcmod",
    "bccomp",
    "bcpow",
    "bcpowmod",
    "bcsqrt",
    "bcfloor",
    "bcceil",
    "bcround",
    "bcscale",
    "PHP_ROUND_HALF_UP",
    "PHP_ROUND_HALF_DOWN",
    "PHP_ROUND_HALF_EVEN",
    "PHP_ROUND_HALF_ODD",
]

PHP_ROUND_HALF_UP = 1
PHP_ROUND_HALF_DOWN = 2
PHP_ROUND_HALF_EVEN = 3
PHP_ROUND_HALF_ODD = 4


def bcadd(num1: object, num2: object, scale: object = None) -> str:
    return get_default_calculator().add(num1, num2, scale)


def bcsub(num1: object, num2: object, scale: object = None) -> str:
    return get_default_calculator().sub(num1, num2, scale)


def bcmul(num1: object, num2: object, scale: object = None) -> str:
    return get_default_calculator().mul(num1, num2, scale)


def bcdiv(num1: object, num2: object, scale: object = None) -> str:
    return get_default_calculator().div(num1, num2, scale)


def bcmod(num1: object, num2: object, scale: object = None) -> str:
    return get_default_calculator().mod(num1, num2, scale)


def bccomp(num1: object, num2: object, scale: object = None) -> int:
    return get_default_calculator().comp(num1, num2, scale)


def bcpow(num: object, exponent: object, scale: object = None) -> str:
    return get_default_calculator().pow(num, exponent, scale)


def bcpowmod(num: object, exponent: object, modulus: object, scale: object = None) -> str:
    return get_default_calculator().powmod(num, exponent, modulus, scale)


def bcsqrt(num: object, scale: object = None) -> str:
    return get_default_calculator().sqrt(num, scale)


def bcfloor(num: object) -> str:
    return get_default_calculator().floor(num)


def bcceil(num: object) -> str:
    return get_default_calculator().ceil(num)


def bcround(num: object, precision: object = 0, mode: object = RoundingMode.HALF_UP) -> str:
    return get_default_calculator().round(num, precision, mode)


def bcscale(scale: object = None) -> int:
    """Set and/or return the default scale of the default calculator."""
    return get_default_calculator().scale(scale)
