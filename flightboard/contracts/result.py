"""Generic service result wrapper."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ServiceError(BaseModel):
    """Structured error from a service call."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, str | int | float | bool | None] | None = None


class ServiceResult(BaseModel, Generic[T]):
    """Generic wrapper for operation outcomes that are expected to fail.

    On success: ``data`` is populated.
    On failure: ``error`` is populated with structured error info.
    """

    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls, code: str, message: str, **details: str | int | float | bool | None
    ) -> "ServiceResult[T]":
        return cls(
            success=False,
            error=ServiceError(code=code, message=message, details=details or None),
        )
