"""Response schemas shared by all endpoints."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by delete endpoints."""

    message: str = Field(
        description="Outcome of the operation",
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(
        description="Error message",
    )
    error_code: str | None = Field(
        default=None,
        description="Optional error code for client handling",
    )
