"""Outcome of a collaborator call: either data or a coded failure."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from dronelog.contracts.enums import FailureKind

T = TypeVar("T")


class ServiceError(BaseModel):
    code: FailureKind = Field(..., description="Machine-readable failure kind")
    message: str = Field(..., description="Operator-facing error message")


class ServiceResult(BaseModel, Generic[T]):
    """``ok`` carries ``data``; ``fail`` carries ``error``."""

    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, code: FailureKind, message: str) -> "ServiceResult[T]":
        return cls(success=False, error=ServiceError(code=code, message=message))
