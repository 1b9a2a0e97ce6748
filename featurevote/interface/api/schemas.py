"""Response envelope and shared request constraints."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

# Loose structural check; the user lookup decides whether the address exists
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ApiResponse(BaseModel, Generic[T]):
    """Successful response envelope."""

    success: bool = True
    data: T


class ErrorDetail(BaseModel):
    """One failed field of a request."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Failed response envelope."""

    success: bool = False
    error: str
    details: list[ErrorDetail] | None = None
