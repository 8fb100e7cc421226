"""Rendering of unscaled integers as decimal strings.

Every operation computes on integers that carry an implied decimal point
``pad`` digits from the right. format_number places that point, fits the
fraction to the requested scale by truncation or zero padding and applies
signed-zero normalisation.
"""

from __future__ import annotations

from bcmath.bigint import to_digits

__all__ = [
    "format_number",
    "zero",
    "one",
    "pad_fraction",
]


def format_number(value: int, scale: int, pad: int) -> str:
    """Render an unscaled integer as a decimal string.

    Args:
        value: Signed integer holding the digits
        scale: Number of fractional digits in the output
        pad: Position of the implied decimal point, counted from the right

    Returns:
        The decimal string. An exact zero is padded to the scale; a negative
        value that truncates to zero collapses to the canonical zero "0",
        without the scale padding PHP keeps for it ("0.00" there).

    Examples:
        format_number(314, 2, 2) == "3.14"
        format_number(314, 1, 2) == "3.1"
        format_number(0, 3, 2) == "0.000"
        format_number(-5, 3, 7) == "0"
        format_number(12, 0, 0) == "12"
    """
    digits = to_digits(abs(value)).rjust(pad + 1, "0")
    if pad:
        integer, fraction = digits[:-pad], digits[-pad:]
    else:
        integer, fraction = digits, ""

    fraction = fraction[:scale].ljust(scale, "0")
    text = f"{integer}.{fraction}" if fraction else integer

    if value < 0:
        if not integer.strip("0") and not fraction.strip("0"):
            return "0"
        return f"-{text}"
    return text


def pad_fraction(integer: str, scale: int) -> str:
    """Append ``scale`` zero fraction digits to an integer string."""
    return f"{integer}.{'0' * scale}" if scale else integer


def zero(scale: int) -> str:
    """Zero rendered at the given scale ("0", "0.00", ...)."""
    return pad_fraction("0", scale)


def one(scale: int) -> str:
    """One rendered at the given scale ("1", "1.00", ...)."""
    return pad_fraction("1", scale)

