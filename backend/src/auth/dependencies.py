"""FastAPI dependencies for authentication.

Usage:
    @router.post("/orders/validate")
    def validate(user: AuthenticatedUser = Depends(get_current_user)):
        ...
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .jwt import decode_token


# auto_error=False so a missing header yields 401 rather than 403
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Caller identity taken from a verified access token."""
    user_id: UUID
    email: Optional[str] = None
    role: str = "authenticated"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthenticatedUser:
    """Validate the bearer token and return the caller identity.

    Raises:
        HTTPException 401: If the token is missing, invalid, expired, or
            lacks a usable subject claim
    """
    if credentials is None:
        raise _unauthorized("Neautorizovaný prístup")

    try:
        payload = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        raise _unauthorized(str(e))

    user_id_str = payload.get("sub")
    if not user_id_str:
        raise _unauthorized("Invalid token: missing user ID claim")

    try:
        user_id = UUID(user_id_str)
    except ValueError as e:
        raise _unauthorized(f"Invalid token claims: {str(e)}")

    return AuthenticatedUser(
        user_id=user_id,
        email=payload.get("email"),
        role=payload.get("role", "authenticated"),
    )
