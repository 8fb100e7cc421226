"""Error hierarchy for bcmath operations.

Every error derives from BCMathError and from the builtin exception a Python
caller would expect for the same failure (ValueError for bad values,
TypeError for bad argument shapes, ZeroDivisionError for division by zero),
so callers can catch either the specific kind or the generic builtin.

Each class carries a stable ``kind`` used by the HTTP layer in error bodies.
"""

from __future__ import annotations

__all__ = [
    "BCMathError",
    "MalformedNumber",
    "InvalidScale",
    "ScaleTooLarge",
    "DivisionByZeroError",
    "NegativePowerOfZero",
    "NegativeSqrtArgument",
    "NegativeExponentInPowmod",
    "ZeroModulus",
    "ExponentTooLarge",
    "UnsupportedRoundingMode",
    "ArgumentCountError",
    "ArgumentTypeError",
    "UnknownOperation",
    "function_name",
]


def function_name(operation: str | None) -> str:
    """Return the bc-prefixed function name used in messages ("add" -> "bcadd")."""
    if not operation:
        return "bcmath"
    return operation if operation.startswith("bc") else f"bc{operation}"


class BCMathError(Exception):
    """Base class for all bcmath errors."""

    kind = "bcmath_error"


class MalformedNumber(BCMathError, ValueError):
    """A numeric-string argument is not well-formed.

    Attributes:
        value: The offending input string
        position: 1-based argument position, when known
        name: Parameter name (e.g. "num1"), when known
        operation: Operation name (e.g. "add"), when known
    """

    kind = "malformed_number"

    def __init__(
        self,
        value: str,
        position: int | None = None,
        name: str | None = None,
        operation: str | None = None,
    ) -> None:
        self.value = value
        self.position = position
        self.name = name
        self.operation = operation
        if position is not None and name is not None:
            message = (
                f"{function_name(operation)}(): Argument #{position} (${name}) is not well-formed"
            )
        else:
            message = f"{function_name(operation)}(): bcmath function argument is not well-formed"
        super().__init__(message)


class InvalidScale(BCMathError, ValueError):
    """Scale (or round precision) outside the accepted range."""

    kind = "invalid_scale"


class ScaleTooLarge(InvalidScale):
    """Scale exceeds the configured working limit for an iterative operation."""

    kind = "scale_too_large"


class DivisionByZeroError(BCMathError, ZeroDivisionError):
    """Division or modulo by zero."""

    kind = "division_by_zero"


class NegativePowerOfZero(DivisionByZeroError):
    """Zero raised to a negative exponent."""

    kind = "negative_power_of_zero"


class NegativeSqrtArgument(BCMathError, ValueError):
    """Square root of a negative number."""

    kind = "negative_sqrt_argument"


class NegativeExponentInPowmod(BCMathError, ValueError):
    """powmod called with a negative exponent."""

    kind = "negative_exponent_in_powmod"


class ZeroModulus(BCMathError, ValueError):
    """powmod called with a zero modulus."""

    kind = "zero_modulus"


class ExponentTooLarge(BCMathError, ValueError):
    """Exponent outside the machine-integer range or the configured power guard."""

    kind = "exponent_too_large"


class UnsupportedRoundingMode(BCMathError, ValueError):
    """Rounding mode is recognised but not implemented."""

    kind = "unsupported_rounding_mode"


class ArgumentCountError(BCMathError, TypeError):
    """Wrong number of arguments passed to a dispatched operation."""

    kind = "argument_count"


class ArgumentTypeError(BCMathError, TypeError):
    """Argument has a type that cannot be coerced at the boundary."""

    kind = "argument_type"


class UnknownOperation(BCMathError, ValueError):
    """Dispatcher received an operation name it does not know."""

    kind = "unknown_operation"
