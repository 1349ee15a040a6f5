"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(ApiModel, Generic[T]):
    code: int
    message: str
    data: Optional[T] = None


class UserCredentials(ApiModel):
    phone_number: str = Field(..., min_length=1, max_length=32)
    password: str = Field(..., max_length=256)


class UserResponse(ApiModel):
    id: str
    phone_number: str


class TokenResponse(ApiModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class TokenData(BaseModel):
    phone_number: str
    expires_at: Optional[datetime] = None


class WalletCreate(ApiModel):
    name: str = Field(..., max_length=100)
    type: str = Field(..., max_length=20)
    account_number: str = Field(..., max_length=64)
    account_scheme: str = Field(..., max_length=20)
    owner: str = Field(..., max_length=32)


class WalletResponse(ApiModel):
    id: str
    name: str
    type: str
    account_number: str
    account_scheme: str
    owner: str
    created_at: Optional[datetime] = None


class PaginatedWalletResponse(ApiModel):
    total_count: int
    page_number: int
    page_size: int
    data: list[WalletResponse]


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


__all__ = [
    "ApiModel",
    "ApiResponse",
    "HealthResponse",
    "PaginatedWalletResponse",
    "TokenData",
    "TokenResponse",
    "UserCredentials",
    "UserResponse",
    "WalletCreate",
    "WalletResponse",
]
