"""Integer-exponent power and modular power."""

from __future__ import annotations

import structlog

from bcmath.bigint import pow_mod_trunc
from bcmath.errors import (
    ExponentTooLarge,
    NegativeExponentInPowmod,
    NegativePowerOfZero,
    ZeroModulus,
)
from bcmath.formatting import format_number, one, zero
from bcmath.number import DecimalNumber

__all__ = [
    "power",
    "powmod",
    "EXPONENT_MIN",
    "EXPONENT_MAX",
]

logger = structlog.get_logger()

# Signed 64-bit exponent range; the minimum itself is rejected
EXPONENT_MIN = -(2**63)
EXPONENT_MAX = 2**63 - 1

# Upper bound on bits per decimal digit, used by the size estimate
_BITS_PER_DIGIT = 4


def _integer_value(number: DecimalNumber) -> int:
    """Signed integer part of a number; fractional digits are discarded."""
    return number.integer_part().unscaled(0)


def power(base: DecimalNumber, exponent: DecimalNumber, scale: int, max_bits: int) -> str:
    """Raise base to an integer exponent.

    Args:
        base: The base
        exponent: The exponent; its fractional digits are discarded
        scale: Fractional digits in the result
        max_bits: Largest estimated result size (in bits) allowed before
            the multiplication starts. For a negative exponent the
            10**(scale + fraction digits) numerator of the reciprocal counts
            as well.

    Returns:
        base**exponent rendered at ``scale``. For a positive exponent the
        exact power is truncated; for a negative exponent the reciprocal is
        computed by truncating division with ``scale`` fractional digits.

    Raises:
        ExponentTooLarge: If the exponent is outside the signed 64-bit range
            or the result would exceed max_bits
        NegativePowerOfZero: If base is zero and the exponent is negative
    """
    e = _integer_value(exponent)
    if not EXPONENT_MIN < e <= EXPONENT_MAX:
        raise ExponentTooLarge("bcpow(): Argument #2 ($exponent) is too large")

    if e == 0:
        return one(scale)
    if base.is_zero:
        if e < 0:
            raise NegativePowerOfZero("Negative power of zero")
        return zero(scale)

    natural = base.natural_scale
    magnitude = abs(base.unscaled(natural))
    n = abs(e)

    # Results carry natural * n fractional digits, so both terms bound the size
    estimated = 0
    if magnitude != 1 or natural:
        estimated = max(magnitude.bit_length(), natural * _BITS_PER_DIGIT) * n
    # The reciprocal divides 10**(scale + natural * n), whatever the base
    if e < 0:
        estimated = max(estimated, (scale + natural * n) * _BITS_PER_DIGIT)
    if estimated > max_bits:
        logger.debug(
            "power_guard_rejected",
            exponent=e,
            scale=scale,
            estimated_bits=estimated,
            max_bits=max_bits,
        )
        raise ExponentTooLarge(
            f"bcpow(): Argument #2 ($exponent) is too large: "
            f"result would exceed {max_bits} bits"
        )

    power = magnitude**n
    if e > 0:
        value, pad = power, natural * n
    else:
        value, pad = 10 ** (scale + natural * n) // power, scale

    if base.negative and n % 2 == 1:
        value = -value
    return format_number(value, scale, pad)


def powmod(
    base: DecimalNumber,
    exponent: DecimalNumber,
    modulus: DecimalNumber,
    scale: int,
) -> str:
    """Compute base**exponent mod modulus on the integer parts of the inputs.

    The remainder follows the sign of base**exponent (truncated remainder);
    the modulus sign is ignored. The result is always an integer; ``scale``
    only appends zero fractional digits.

    Raises:
        NegativeExponentInPowmod: If the exponent is negative
        ZeroModulus: If the modulus is zero
    """
    b = _integer_value(base)
    e = _integer_value(exponent)
    m = abs(_integer_value(modulus))

    if e < 0:
        raise NegativeExponentInPowmod(
            "bcpowmod(): Argument #2 ($exponent) must be greater than or equal to 0"
        )
    if m == 0:
        raise ZeroModulus("bcpowmod(): Argument #3 ($modulus) cannot be zero")
    if e == 0:
        return one(scale)

    return format_number(pow_mod_trunc(b, e, m), scale, 0)
