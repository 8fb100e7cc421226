"""Numeric-string parsing and the DecimalNumber value type.

Accepted grammar: ``[+-]?[0-9]*(\\.[0-9]*)?``. The empty string is zero.
There is no exponent notation, no digit grouping and no whitespace.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bcmath.bigint import from_digits
from bcmath.errors import MalformedNumber

__all__ = [
    "DecimalNumber",
    "parse_number",
    "is_well_formed",
    "NUMBER_PATTERN",
]

# re.ASCII keeps \d from matching non-ASCII digits
NUMBER_PATTERN = re.compile(r"([+-]?)(\d*)(?:\.(\d*))?", re.ASCII)


@dataclass(frozen=True, slots=True)
class DecimalNumber:
    """A validated decimal number split into sign, integer and fraction digits.

    Attributes:
        negative: True for values below zero; always False for zero
        integer: Integer digits, at least "0"
        fraction: Fractional digits exactly as written (may be empty)
    """

    negative: bool
    integer: str
    fraction: str

    def __post_init__(self) -> None:
        if not self.integer:
            object.__setattr__(self, "integer", "0")
        if self.negative and self.is_zero:
            object.__setattr__(self, "negative", False)

    @classmethod
    def zero(cls) -> DecimalNumber:
        return cls(False, "0", "")

    @property
    def is_zero(self) -> bool:
        """True when every digit is zero (any spelling of zero)."""
        return not self.integer.strip("0") and not self.fraction.strip("0")

    @property
    def natural_scale(self) -> int:
        """Number of fractional digits as written."""
        return len(self.fraction)

    @property
    def has_fraction(self) -> bool:
        """True when any fractional digit is non-zero."""
        return bool(self.fraction.strip("0"))

    @property
    def sign(self) -> int:
        return -1 if self.negative else 1

    def unscaled(self, pad: int) -> int:
        """Signed integer of the digits with the fraction fitted to ``pad`` places.

        The fraction is right-padded with zeros, or truncated, to exactly
        ``pad`` digits. ``DecimalNumber("1.5").unscaled(3) == 1500``.
        """
        fraction = self.fraction[:pad].ljust(pad, "0")
        magnitude = from_digits(self.integer + fraction)
        return -magnitude if self.negative else magnitude

    def integer_part(self) -> DecimalNumber:
        """Drop the fraction (truncation toward zero)."""
        return DecimalNumber(self.negative, self.integer, "")

    def negate(self) -> DecimalNumber:
        return DecimalNumber(not self.negative, self.integer, self.fraction)

    def abs(self) -> DecimalNumber:
        return DecimalNumber(False, self.integer, self.fraction)

    def __str__(self) -> str:
        text = self.integer
        if self.fraction:
            text = f"{text}.{self.fraction}"
        return f"-{text}" if self.negative else text


def parse_number(
    value: str,
    position: int | None = None,
    name: str | None = None,
    operation: str | None = None,
) -> DecimalNumber:
    """Validate a numeric string and split it into a DecimalNumber.

    Args:
        value: The input string
        position: 1-based argument position (for error messages)
        name: Parameter name (for error messages)
        operation: Operation name (for error messages)

    Returns:
        The parsed DecimalNumber

    Raises:
        MalformedNumber: If value does not match the number grammar
    """
    match = NUMBER_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedNumber(value, position, name, operation)

    sign, integer, fraction = match.groups()
    # A bare sign carries no digits and no decimal point
    if sign and not integer and fraction is None:
        raise MalformedNumber(value, position, name, operation)

    return DecimalNumber(sign == "-", integer, fraction or "")


def is_well_formed(value: str) -> bool:
    """Check a numeric string without raising."""
    try:
        parse_number(value)
    except MalformedNumber:
        return False
    return True
