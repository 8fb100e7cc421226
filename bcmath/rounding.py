"""Floor, ceiling and rounding.

round() supports four half-way rules. The remaining PHP 8.4 rounding modes
are part of the RoundingMode enum so they can be named and parsed, but
round() rejects them with UnsupportedRoundingMode.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum

import structlog

from bcmath.errors import ScaleTooLarge, UnsupportedRoundingMode
from bcmath.formatting import format_number
from bcmath.number import DecimalNumber, parse_number

__all__ = [
    "RoundingMode",
    "SUPPORTED_MODES",
    "LEGACY_MODE_CONSTANTS",
    "floor",
    "ceil",
    "round_number",
    "check_supported",
    "shift_right",
]

logger = structlog.get_logger()


class RoundingMode(str, Enum):
    """Rounding modes, valued like PHP 8.4's RoundingMode cases."""

    HALF_UP = "half_away_from_zero"
    HALF_DOWN = "half_towards_zero"
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"
    TOWARDS_ZERO = "towards_zero"
    AWAY_FROM_ZERO = "away_from_zero"
    NEGATIVE_INFINITY = "negative_infinity"
    POSITIVE_INFINITY = "positive_infinity"

    # PHP 8.4 case names
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_TOWARDS_ZERO = "half_towards_zero"

    @property
    def is_supported(self) -> bool:
        return self in SUPPORTED_MODES


SUPPORTED_MODES = frozenset(
    {
        RoundingMode.HALF_UP,
        RoundingMode.HALF_DOWN,
        RoundingMode.HALF_EVEN,
        RoundingMode.HALF_ODD,
    }
)

# PHP_ROUND_HALF_* integer constants
LEGACY_MODE_CONSTANTS = {
    1: RoundingMode.HALF_UP,
    2: RoundingMode.HALF_DOWN,
    3: RoundingMode.HALF_EVEN,
    4: RoundingMode.HALF_ODD,
}


def check_supported(mode: RoundingMode) -> RoundingMode:
    """Return mode if round() implements it.

    Raises:
        UnsupportedRoundingMode: If mode is not one of the four half-way rules
    """
    if mode not in SUPPORTED_MODES:
        raise UnsupportedRoundingMode(
            f"bcround(): Argument #3 ($mode) {mode.name} is not supported"
        )
    return mode


def floor(number: DecimalNumber) -> str:
    """Largest integer not greater than number."""
    value = number.integer_part().unscaled(0)
    if number.negative and number.has_fraction:
        value -= 1
    return format_number(value, 0, 0)


def ceil(number: DecimalNumber) -> str:
    """Smallest integer not less than number."""
    value = number.integer_part().unscaled(0)
    if not number.negative and number.has_fraction:
        value += 1
    return format_number(value, 0, 0)


def shift_right(number: DecimalNumber, places: int) -> DecimalNumber:
    """Divide by 10**places exactly by moving the decimal point left."""
    integer = number.integer.rjust(places + 1, "0")
    return DecimalNumber(
        number.negative,
        integer[:-places],
        integer[-places:] + number.fraction,
    )


def _rounds_up(kept: int, dropped: str, mode: RoundingMode) -> bool:
    """Decide whether the kept magnitude moves one unit away from zero.

    Args:
        kept: Magnitude truncated to the target precision
        dropped: The discarded fractional digits
        mode: A supported rounding mode
    """
    first = int(dropped[0]) if dropped else 0
    if first != 5:
        return first > 5
    beyond_half = bool(dropped[1:].strip("0"))
    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return beyond_half
    if mode is RoundingMode.HALF_EVEN:
        return beyond_half or kept % 2 == 1
    # HALF_ODD
    return beyond_half or kept % 2 == 0


def _through_float(number: DecimalNumber) -> DecimalNumber:
    """Round-trip a number through a binary float, keeping its precision loss."""
    value = float(str(number))
    if not math.isfinite(value):
        logger.warning("float_rounding_overflow", digits=len(number.integer))
        return number
    return parse_number(format(Decimal(repr(value)), "f"))


def _round_at(number: DecimalNumber, precision: int, mode: RoundingMode) -> str:
    kept = abs(number.unscaled(precision))
    if _rounds_up(kept, number.fraction[precision:], mode):
        kept += 1
    return format_number(-kept if number.negative else kept, precision, precision)


def round_number(
    number: DecimalNumber,
    precision: int = 0,
    mode: RoundingMode = RoundingMode.HALF_UP,
    float_parity: bool = False,
    max_precision: int | None = None,
) -> str:
    """Round number to ``precision`` fractional digits.

    A negative precision rounds to a power of ten left of the decimal point:
    round("1234.5678", -2) == "1200".

    Args:
        number: Value to round
        precision: Fractional digits to keep; negative values round to tens,
            hundreds, ...
        mode: Half-way rule
        float_parity: Send HALF_EVEN and HALF_ODD through a float round-trip
            first, matching PHP's float-based rounding and its
            precision loss for large values
        max_precision: Largest absolute precision accepted, or None for no
            limit; the result is padded or shifted by that many digits

    Raises:
        UnsupportedRoundingMode: If mode is not one of the four half-way rules
        ScaleTooLarge: If abs(precision) exceeds max_precision
    """
    check_supported(mode)
    if max_precision is not None and abs(precision) > max_precision:
        logger.debug("round_guard_rejected", precision=precision, max_precision=max_precision)
        raise ScaleTooLarge(
            f"bcround(): Argument #2 ($precision) exceeds the configured limit of {max_precision}"
        )

    if float_parity and mode in (RoundingMode.HALF_EVEN, RoundingMode.HALF_ODD):
        number = _through_float(number)

    if precision >= 0:
        return _round_at(number, precision, mode)

    places = -precision
    rounded = _round_at(shift_right(number, places), 0, mode)
    if rounded == "0":
        return "0"
    return rounded + "0" * places
