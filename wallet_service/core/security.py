"""JWT session token helpers and the bearer identity dependency."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from wallet_service.core.config import get_settings
from wallet_service.schemas import TokenData

security = HTTPBearer(auto_error=False)


class InvalidTokenError(Exception):
    """Raised when a session token fails signature, expiry or claim checks."""


def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    issued_at: Optional[datetime] = None,
) -> str:
    settings = get_settings()
    if not settings.secret_key:
        raise RuntimeError("token signing key is not configured")

    issued = issued_at or datetime.now(timezone.utc)
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": subject,
        "iss": settings.security.issuer,
        "aud": settings.security.audience,
        "iat": issued,
        "exp": issued + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            audience=settings.security.audience,
            issuer=settings.security.issuer,
        )
    except JWTError as exc:
        raise InvalidTokenError("could not validate credentials") from exc

    subject = payload.get("sub")
    if not subject:
        raise InvalidTokenError("token has no subject")
    return TokenData(phone_number=subject, expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc))


async def get_current_phone_number(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Resolve the caller identity (phone number) from the bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        token_data = decode_access_token(credentials.credentials)
    except InvalidTokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    return token_data.phone_number


__all__ = [
    "InvalidTokenError",
    "create_access_token",
    "decode_access_token",
    "get_current_phone_number",
]
