"""API endpoints for bcmath operations."""

import structlog
from fastapi import APIRouter, Depends

from bcmath.api.models import OperationRequest, OperationResponse
from bcmath.calculator import Calculator, get_default_calculator
from bcmath.dispatch import dispatch

logger = structlog.get_logger()

router = APIRouter()


def get_calculator() -> Calculator:
    """Dependency provider: a fresh calculator per request.

    Each request starts from the configured default scale, so a
    POST /v1/scale only affects the request that sends it and never the
    results other clients get. Override this in tests to inject one:
        app.dependency_overrides[get_calculator] = lambda: Calculator(config)
    """
    return Calculator(get_default_calculator().config)


@router.post("/v1/{operation}")
def evaluate(
    operation: str,
    request: OperationRequest,
    calculator: Calculator = Depends(get_calculator),
) -> OperationResponse:
    """Evaluate one operation.

    Args:
        operation: Operation name (add, sub, mul, div, mod, comp, pow, powmod,
            sqrt, floor, ceil, round, scale)
        request: Positional arguments
        calculator: Injected calculator (via FastAPI Depends)

    Error Handling:
        BCMathError subclasses propagate to the exception handler registered
        in bcmath.api.main, which maps them to status codes.
    """
    result = dispatch(calculator, operation, request.args)
    logger.info(
        "evaluated_operation",
        operation=operation,
        arg_count=len(request.args),
    )
    return OperationResponse(operation=operation, result=result)
