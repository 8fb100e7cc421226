"""Coercion of loosely typed caller arguments at the public boundary.

The engine works on validated DecimalNumber values and int scales only.
Callers, however, pass strings, ints, bools, Decimals or None, the way the
PHP functions accept them. These helpers convert once, report errors with
the argument position and name, and leave the core untouched by duck typing.
"""

from __future__ import annotations

import re
from decimal import Decimal

import structlog

from bcmath.errors import ArgumentTypeError, MalformedNumber, UnsupportedRoundingMode, function_name
from bcmath.formatting import format_number
from bcmath.number import DecimalNumber, parse_number
from bcmath.rounding import LEGACY_MODE_CONSTANTS, RoundingMode

__all__ = [
    "NumberLike",
    "to_number_string",
    "to_number",
    "to_scale",
    "to_rounding_mode",
    "type_name",
]

logger = structlog.get_logger()

NumberLike = str | int | bool | Decimal | None

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def type_name(value: object) -> str:
    """PHP-style type name used in TypeError messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    return type(value).__name__


def to_number_string(value: object, position: int, name: str, operation: str) -> str:
    """Convert a caller argument to a numeric string (not yet validated).

    Raises:
        ArgumentTypeError: For types other than str, int, bool, Decimal, None
        MalformedNumber: For non-finite Decimals
    """
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return format_number(value, 0, 0)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise MalformedNumber(str(value), position, name, operation)
        return format(value, "f")
    if value is None:
        logger.warning(
            "deprecated_null_argument",
            message=(
                f"{function_name(operation)}(): Passing null to parameter "
                f"#{position} (${name}) of type string is deprecated"
            ),
        )
        return "0"
    raise ArgumentTypeError(
        f"{function_name(operation)}(): Argument #{position} (${name}) "
        f"must be of type string, {type_name(value)} given"
    )


def to_number(value: object, position: int, name: str, operation: str) -> DecimalNumber:
    """Coerce and validate a caller argument in one step."""
    return parse_number(to_number_string(value, position, name, operation), position, name, operation)


def to_scale(value: object, position: int, operation: str, name: str = "scale") -> int | None:
    """Convert a scale argument to int; None means "use the default".

    Raises:
        ArgumentTypeError: If value is not an int, bool or integer string
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ArgumentTypeError(
        f"{function_name(operation)}(): Argument #{position} (${name}) "
        f"must be of type ?int, {type_name(value)} given"
    )


def to_rounding_mode(value: object) -> RoundingMode:
    """Accept a RoundingMode, its value or name, or a PHP_ROUND_HALF_* constant.

    Raises:
        UnsupportedRoundingMode: For integers that are not PHP_ROUND_HALF_* constants
        ArgumentTypeError: For anything else that does not name a mode
    """
    if isinstance(value, RoundingMode):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return LEGACY_MODE_CONSTANTS[value]
        except KeyError:
            raise UnsupportedRoundingMode(
                f"bcround(): Argument #3 ($mode) must be a valid rounding mode (PHP_ROUND_*), {value} given"
            ) from None
    if isinstance(value, str):
        try:
            return RoundingMode(value)
        except ValueError:
            pass
        text = value.strip().replace("-", "_")
        # "HalfEven" -> "HALF_EVEN"
        snake = _CAMEL_BOUNDARY.sub("_", text).upper()
        upper = text.upper()
        for candidate in (upper, snake, upper.removeprefix("PHP_ROUND_")):
            if candidate in RoundingMode.__members__:
                return RoundingMode[candidate]
    raise ArgumentTypeError(
        f"bcround(): Argument #3 ($mode) must be of type RoundingMode|int, {type_name(value)} given"
    )
