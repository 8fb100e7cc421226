"""Pydantic models for the bcmath HTTP API."""

from pydantic import BaseModel, Field

# JSON values an argument may take; coercion happens in the calculator
Argument = str | int | bool | None


class OperationRequest(BaseModel):
    """Positional arguments for one operation call."""

    args: list[Argument] = Field(
        default_factory=list,
        description="Positional arguments in PHP bcmath order, e.g. [num1, num2, scale].",
    )


class OperationResponse(BaseModel):
    """Result of a successful operation call."""

    operation: str = Field(description="Operation name, e.g. 'add'.")
    result: str | int = Field(
        description="Decimal string result; an integer for comp and scale.",
    )


class ErrorResponse(BaseModel):
    """Error body returned for rejected calls."""

    error: str = Field(description="Stable error kind, e.g. 'division_by_zero'.")
    detail: str = Field(description="Human-readable message.")


class HealthResponse(BaseModel):
    """Health check body."""

    status: str = "ok"
    default_scale: int
