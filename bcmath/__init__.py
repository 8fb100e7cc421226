"""bcmath - arbitrary-precision decimal arithmetic on strings."""

from bcmath.calculator import Calculator, get_default_calculator, set_default_calculator
from bcmath.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from bcmath.errors import (
    ArgumentCountError,
    ArgumentTypeError,
    BCMathError,
    DivisionByZeroError,
    ExponentTooLarge,
    InvalidScale,
    MalformedNumber,
    NegativeExponentInPowmod,
    NegativePowerOfZero,
    NegativeSqrtArgument,
    ScaleTooLarge,
    UnknownOperation,
    UnsupportedRoundingMode,
    ZeroModulus,
)
from bcmath.functions import (
    PHP_ROUND_HALF_DOWN,
    PHP_ROUND_HALF_EVEN,
    PHP_ROUND_HALF_ODD,
    PHP_ROUND_HALF_UP,
    bcadd,
    bcceil,
    bccomp,
    bcdiv,
    bcfloor,
    bcmod,
    bcmul,
    bcpow,
    bcpowmod,
    bcround,
    bcscale,
    bcsqrt,
    bcsub,
)
from bcmath.number import DecimalNumber, is_well_formed, parse_number
from bcmath.rounding import RoundingMode

__version__ = "0.1.0"
__all__ = [
    # Calculator
    "Calculator",
    "get_default_calculator",
    "set_default_calculator",
    # Config
    "EngineConfig",
    "DEFAULT_ENGINE_CONFIG",
    # Values
    "DecimalNumber",
    "RoundingMode",
    "parse_number",
    "is_well_formed",
    # Functions
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
    # Errors
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
    "__version__",
]
