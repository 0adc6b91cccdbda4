"""Uniform API response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Wrapper for every API response.

    On success: ``data`` and/or ``message`` are populated.
    On failure: ``error`` holds a human-readable reason.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse[T]":
        return cls(success=False, error=error)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
