"""Scale resolution and validation."""

from __future__ import annotations

import threading

from bcmath.config import MAX_SCALE
from bcmath.errors import InvalidScale, function_name

__all__ = [
    "ScaleState",
    "resolve_scale",
    "validate_scale",
    "validate_precision",
]


class ScaleState:
    """Lock-guarded default scale, initialised lazily from a fallback value."""

    __slots__ = ("_fallback", "_value", "_lock")

    def __init__(self, fallback: int = 0) -> None:
        self._fallback = fallback
        self._value: int | None = None
        self._lock = threading.Lock()

    def get(self) -> int:
        with self._lock:
            if self._value is None:
                self._value = self._fallback
            return self._value

    def set(self, value: int) -> int:
        """Store a new default scale and return the previous one."""
        with self._lock:
            previous = self._fallback if self._value is None else self._value
            self._value = value
            return previous

    def reset(self) -> None:
        """Forget the stored value; the next get() reinitialises from the fallback."""
        with self._lock:
            self._value = None

    def __repr__(self) -> str:
        return f"ScaleState(value={self._value}, fallback={self._fallback})"


def validate_scale(scale: int, operation: str | None = None, position: int = 1) -> int:
    """Check that a scale lies in [0, 2^31 - 1].

    Raises:
        InvalidScale: If scale is out of range
    """
    if not 0 <= scale <= MAX_SCALE:
        raise InvalidScale(
            f"{function_name(operation)}(): Argument #{position} ($scale) "
            f"must be between 0 and {MAX_SCALE}"
        )
    return scale


def validate_precision(precision: int, operation: str | None = "round", position: int = 2) -> int:
    """Check a round() precision, which may be negative."""
    if not -MAX_SCALE <= precision <= MAX_SCALE:
        raise InvalidScale(
            f"{function_name(operation)}(): Argument #{position} ($precision) "
            f"must be between {-MAX_SCALE} and {MAX_SCALE}"
        )
    return precision


def resolve_scale(explicit: int | None, state: ScaleState) -> int:
    """Return the explicit scale if given, else the state's current default."""
    if explicit is not None:
        return explicit
    return state.get()
