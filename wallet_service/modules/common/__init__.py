"""Shared abstractions used across domain modules."""

from .results import ErrorKind, PaginatedResult, ServiceResult

__all__ = ["ErrorKind", "PaginatedResult", "ServiceResult"]
