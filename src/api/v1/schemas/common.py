"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body written by the application exception handlers."""

    error_code: str
    message: str
    details: dict[str, Any] | list[Any] | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
