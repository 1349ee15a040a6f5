"""Typed outcomes returned by the domain services.

Every public service operation answers with a :class:`ServiceResult` instead of
raising. The HTTP layer renders ``(status_code, message, data)`` verbatim, so
the status code decision lives next to the business rule that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_ERROR = "internal_error"

    @property
    def http_status(self) -> HTTPStatus:
        return _ERROR_STATUS[self]


_ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: HTTPStatus.BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.INTERNAL_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


@dataclass(slots=True)
class ServiceResult(Generic[T]):
    status_code: HTTPStatus
    message: str
    data: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, message: str, data: Optional[T] = None, status_code: HTTPStatus = HTTPStatus.OK) -> "ServiceResult[T]":
        return cls(status_code=status_code, message=message, data=data)

    @classmethod
    def created(cls, message: str, data: T) -> "ServiceResult[T]":
        return cls(status_code=HTTPStatus.CREATED, message=message, data=data)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(status_code=error.http_status, message=message, error=error)


@dataclass(slots=True)
class PaginatedResult(Generic[T]):
    total_count: int
    page_number: int
    page_size: int
    data: list[T] = field(default_factory=list)


__all__ = ["ErrorKind", "PaginatedResult", "ServiceResult"]
