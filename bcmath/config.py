"""Engine configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "EngineConfig",
    "DEFAULT_ENGINE_CONFIG",
    "MAX_SCALE",
    "TRUTHY",
]

# Largest scale accepted by any operation (signed 32-bit limit)
MAX_SCALE = 2**31 - 1

TRUTHY = ("true", "1", "yes", "on")


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


@dataclass(frozen=True)
class EngineConfig:
    """Centralized configuration for the arithmetic engine.

    Attributes:
        default_scale: Scale used when a call omits one and no scale has been
            set on the calculator yet (default: 0)
        strict: If True, malformed input to floor/ceil/round raises
            MalformedNumber. If False (legacy), a warning is logged and "0"
            is returned.
        float_rounding_parity: If True, HALF_EVEN and HALF_ODD rounding goes
            through a float round-trip, matching PHP's float-based rounding
            (and its precision loss) for large values. If False, rounding is exact.
        max_power_bits: Upper bound on the estimated bit size of a pow()
            result before the multiplication starts (default: 2^26 bits)
        max_sqrt_scale: Upper bound on the scale accepted by sqrt(), whose
            digit loop runs once per requested digit (default: 100,000)
        max_round_precision: Upper bound on the absolute precision accepted
            by round(), which pads or shifts by that many digits
            (default: 100,000)
    """

    default_scale: int = 0
    strict: bool = True
    float_rounding_parity: bool = False
    max_power_bits: int = 2**26
    max_sqrt_scale: int = 100_000
    max_round_precision: int = 100_000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Build a configuration from environment variables.

        Variables:
        - BCMATH_SCALE: default scale; negative or non-numeric values become 0
        - BCMATH_STRICT: strict malformed-input handling (default: true)
        - BCMATH_FLOAT_ROUNDING: float-parity HALF_EVEN/HALF_ODD (default: false)
        - BCMATH_MAX_POWER_BITS: pow() result size guard
        - BCMATH_MAX_SQRT_SCALE: sqrt() scale guard
        - BCMATH_MAX_ROUND_PRECISION: round() precision guard
        """
        if environ is None:
            environ = os.environ
        defaults = cls()
        return cls(
            default_scale=min(max(_env_int(environ, "BCMATH_SCALE", 0), 0), MAX_SCALE),
            strict=_env_bool(environ, "BCMATH_STRICT", defaults.strict),
            float_rounding_parity=_env_bool(
                environ, "BCMATH_FLOAT_ROUNDING", defaults.float_rounding_parity
            ),
            max_power_bits=_env_int(environ, "BCMATH_MAX_POWER_BITS", defaults.max_power_bits),
            max_sqrt_scale=_env_int(environ, "BCMATH_MAX_SQRT_SCALE", defaults.max_sqrt_scale),
            max_round_precision=_env_int(
                environ, "BCMATH_MAX_ROUND_PRECISION", defaults.max_round_precision
            ),
        )


# Default configuration instance
DEFAULT_ENGINE_CONFIG = EngineConfig()
