"""Public entry point for bcmath operations.

A Calculator owns the configuration and the default-scale context. Each
method coerces and validates its arguments once, resolves the scale, and
hands DecimalNumber values to the engine modules. Nothing below this layer
reads shared state.

Usage:
    from bcmath import Calculator, EngineConfig

    calc = Calculator(EngineConfig(default_scale=2))
    calc.add("1.1", "2.04")          # "3.14"
    calc.div("1", "3", 5)            # "0.33333"
    calc.round("2.5", 0, "HalfEven")  # "2"

The process-wide default calculator (get_default_calculator) backs the
PHP-style module functions bcadd(), bcscale() and friends.
"""

from __future__ import annotations

import threading

import structlog

from bcmath import arithmetic, power, roots, rounding
from bcmath.coercion import to_number, to_rounding_mode, to_scale
from bcmath.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from bcmath.errors import MalformedNumber, function_name
from bcmath.number import DecimalNumber
from bcmath.rounding import RoundingMode
from bcmath.scale import ScaleState, resolve_scale, validate_precision, validate_scale

__all__ = [
    "Calculator",
    "get_default_calculator",
    "set_default_calculator",
]

logger = structlog.get_logger()


class Calculator:
    """Arbitrary-precision decimal calculator with a default-scale context.

    Attributes:
        config: Engine configuration (strict mode, resource guards, ...)
    """

    def __init__(self, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> None:
        self.config = config
        self._scale = ScaleState(config.default_scale)

    def __repr__(self) -> str:
        return f"Calculator(scale={self._scale.get()}, strict={self.config.strict})"

    # --- Scale context ---

    def scale(self, scale: object = None) -> int:
        """Set and/or return the default scale.

        Args:
            scale: New default scale, or None to only read it

        Returns:
            The default scale after the call
        """
        value = to_scale(scale, 1, "scale")
        if value is not None:
            self._scale.set(validate_scale(value, "scale", 1))
        return self._scale.get()

    def _resolve(
        self,
        scale: object,
        position: int,
        operation: str,
        default: int | None = None,
    ) -> int:
        explicit = to_scale(scale, position, operation)
        if explicit is None and default is not None:
            explicit = default
        return validate_scale(resolve_scale(explicit, self._scale), operation, position)

    def _lenient(self, value: object, operation: str) -> DecimalNumber | None:
        """Parse the single argument of floor/ceil/round under the strict/legacy policy.

        Returns None when the argument is malformed and legacy mode is on.
        """
        try:
            return to_number(value, 1, "num", operation)
        except MalformedNumber:
            if self.config.strict:
                raise
            logger.warning(
                "malformed_number",
                operation=function_name(operation),
                position=1,
                message=f"{function_name(operation)}(): Argument #1 ($num) is not well-formed",
            )
            return None

    # --- Arithmetic ---

    def add(self, num1: object, num2: object, scale: object = None) -> str:
        """Add two numbers: num1 + num2."""
        x = to_number(num1, 1, "num1", "add")
        y = to_number(num2, 2, "num2", "add")
        return arithmetic.add(x, y, self._resolve(scale, 3, "add"))

    def sub(self, num1: object, num2: object, scale: object = None) -> str:
        """Subtract: num1 - num2."""
        x = to_number(num1, 1, "num1", "sub")
        y = to_number(num2, 2, "num2", "sub")
        return arithmetic.sub(x, y, self._resolve(scale, 3, "sub"))

    def mul(self, num1: object, num2: object, scale: object = None) -> str:
        """Multiply: num1 * num2."""
        x = to_number(num1, 1, "num1", "mul")
        y = to_number(num2, 2, "num2", "mul")
        return arithmetic.mul(x, y, self._resolve(scale, 3, "mul"))

    def div(self, num1: object, num2: object, scale: object = None) -> str:
        """Divide: num1 / num2.

        Raises:
            DivisionByZeroError: If num2 is zero
        """
        x = to_number(num1, 1, "num1", "div")
        y = to_number(num2, 2, "num2", "div")
        return arithmetic.div(x, y, self._resolve(scale, 3, "div"))

    def mod(self, num1: object, num2: object, scale: object = None) -> str:
        """Truncated-division remainder of num1 / num2.

        Raises:
            DivisionByZeroError: If num2 is zero
        """
        x = to_number(num1, 1, "num1", "mod")
        y = to_number(num2, 2, "num2", "mod")
        return arithmetic.mod(x, y, self._resolve(scale, 3, "mod"))

    def comp(self, num1: object, num2: object, scale: object = None) -> int:
        """Compare two numbers up to ``scale`` digits (default 0, not the context scale)."""
        x = to_number(num1, 1, "num1", "comp")
        y = to_number(num2, 2, "num2", "comp")
        return arithmetic.comp(x, y, self._resolve(scale, 3, "comp", default=0))

    # --- Powers and roots ---

    def pow(self, num: object, exponent: object, scale: object = None) -> str:
        """Raise num to an integer power."""
        base = to_number(num, 1, "num", "pow")
        e = to_number(exponent, 2, "exponent", "pow")
        resolved = self._resolve(scale, 3, "pow")
        return power.power(base, e, resolved, self.config.max_power_bits)

    def powmod(self, num: object, exponent: object, modulus: object, scale: object = None) -> str:
        """Raise num to a power reduced by modulus (integer parts only)."""
        base = to_number(num, 1, "num", "powmod")
        e = to_number(exponent, 2, "exponent", "powmod")
        m = to_number(modulus, 3, "modulus", "powmod")
        return power.powmod(base, e, m, self._resolve(scale, 4, "powmod", default=0))

    def sqrt(self, num: object, scale: object = None) -> str:
        """Square root of num, truncated to ``scale`` digits."""
        n = to_number(num, 1, "num", "sqrt")
        resolved = self._resolve(scale, 2, "sqrt")
        return roots.sqrt(n, resolved, self.config.max_sqrt_scale)

    # --- Rounding ---

    def floor(self, num: object) -> str:
        """Round down to an integer."""
        n = self._lenient(num, "floor")
        return "0" if n is None else rounding.floor(n)

    def ceil(self, num: object) -> str:
        """Round up to an integer."""
        n = self._lenient(num, "ceil")
        return "0" if n is None else rounding.ceil(n)

    def round(
        self,
        num: object,
        precision: object = 0,
        mode: object = RoundingMode.HALF_UP,
    ) -> str:
        """Round num to ``precision`` digits; negative precision rounds left of the point."""
        resolved_mode = rounding.check_supported(to_rounding_mode(mode))
        places = to_scale(precision, 2, "round", name="precision")
        places = validate_precision(0 if places is None else places)
        n = self._lenient(num, "round")
        if n is None:
            return "0"
        return rounding.round_number(
            n,
            places,
            resolved_mode,
            float_parity=self.config.float_rounding_parity,
            max_precision=self.config.max_round_precision,
        )


_default_calculator: Calculator | None = None
_default_lock = threading.Lock()


def get_default_calculator() -> Calculator:
    """Return the process-wide calculator, configured from the environment on first use."""
    global _default_calculator
    with _default_lock:
        if _default_calculator is None:
            _default_calculator = Calculator(EngineConfig.from_env())
        return _default_calculator


def set_default_calculator(calculator: Calculator | None) -> None:
    """Replace the process-wide calculator; None rebuilds it on next use."""
    global _default_calculator
    with _default_lock:
        _default_calculator = calculator
