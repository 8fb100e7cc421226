"""FastAPI application for bcmath."""

import logging
import os

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from bcmath.api.endpoints import get_calculator, router
from bcmath.api.models import ErrorResponse, HealthResponse
from bcmath.calculator import Calculator
from bcmath.errors import BCMathError, DivisionByZeroError, UnknownOperation
from bcmath.logging_config import configure_logging

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BCMATH_HOST", "0.0.0.0")
PORT = int(os.environ.get("BCMATH_PORT", "8000"))
DEBUG = os.environ.get("BCMATH_DEBUG", "false").lower() in ("true", "1", "yes")

configure_logging(logging.DEBUG if DEBUG else logging.INFO)

logger = structlog.get_logger()

app = FastAPI(
    title="bcmath",
    description="Arbitrary-precision decimal arithmetic over strings",
    version="0.1.0",
)


def status_for(error: BCMathError) -> int:
    """HTTP status code for an engine error."""
    if isinstance(error, UnknownOperation):
        return 404
    if isinstance(error, DivisionByZeroError):
        return 422
    return 400


@app.exception_handler(BCMathError)
async def bcmath_error_handler(request: Request, exc: BCMathError) -> JSONResponse:
    """Render engine errors as {"error": kind, "detail": message}."""
    logger.warning(
        "operation_rejected",
        path=request.url.path,
        kind=exc.kind,
        detail=str(exc),
    )
    body = ErrorResponse(error=exc.kind, detail=str(exc))
    return JSONResponse(status_code=status_for(exc), content=body.model_dump())


app.include_router(router)


@app.get("/health")
def health(calculator: Calculator = Depends(get_calculator)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(default_scale=calculator.scale())


def run() -> None:
    """Run the bcmath API server.

    Configuration via environment variables:
    - BCMATH_HOST: Host to bind to (default: 0.0.0.0)
    - BCMATH_PORT: Port to bind to (default: 8000)
    - BCMATH_DEBUG: Enable debug logging and reload mode (default: false)
    """
    uvicorn.run(
        "bcmath.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
