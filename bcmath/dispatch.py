"""Name-based dispatch for callers that receive an operation as data.

The HTTP service receives ``{"args": [...]}`` for a named operation. This
module checks the argument count against the operation's signature and calls
the matching Calculator method.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from bcmath.calculator import Calculator
from bcmath.errors import ArgumentCountError, UnknownOperation, function_name

__all__ = [
    "Signature",
    "SIGNATURES",
    "dispatch",
    "check_arity",
]


@dataclass(frozen=True)
class Signature:
    """Accepted argument count range and implementing method of an operation."""

    method: Callable[..., str | int]
    min_args: int
    max_args: int


SIGNATURES: dict[str, Signature] = {
    "add": Signature(Calculator.add, 2, 3),
    "sub": Signature(Calculator.sub, 2, 3),
    "mul": Signature(Calculator.mul, 2, 3),
    "div": Signature(Calculator.div, 2, 3),
    "mod": Signature(Calculator.mod, 2, 3),
    "comp": Signature(Calculator.comp, 2, 3),
    "pow": Signature(Calculator.pow, 2, 3),
    "powmod": Signature(Calculator.powmod, 3, 4),
    "sqrt": Signature(Calculator.sqrt, 1, 2),
    "floor": Signature(Calculator.floor, 1, 1),
    "ceil": Signature(Calculator.ceil, 1, 1),
    "round": Signature(Calculator.round, 1, 3),
    "scale": Signature(Calculator.scale, 0, 1),
}


def _parameters(count: int) -> str:
    return "parameter" if count == 1 else "parameters"


def check_arity(operation: str, count: int) -> Signature:
    """Validate an argument count for an operation.

    Raises:
        UnknownOperation: If the operation is not known
        ArgumentCountError: If count is outside the accepted range
    """
    signature = SIGNATURES.get(operation)
    if signature is None:
        raise UnknownOperation(f"Unknown operation: {operation!r}")

    name = function_name(operation)
    if count < signature.min_args:
        raise ArgumentCountError(
            f"{name}() expects at least {signature.min_args} "
            f"{_parameters(signature.min_args)}, {count} given"
        )
    if count > signature.max_args:
        raise ArgumentCountError(
            f"{name}() expects at most {signature.max_args} "
            f"{_parameters(signature.max_args)}, {count} given"
        )
    return signature


def dispatch(calculator: Calculator, operation: str, args: Sequence[object]) -> str | int:
    """Call a Calculator operation by name with positional arguments."""
    signature = check_arity(operation, len(args))
    return signature.method(calculator, *args)
