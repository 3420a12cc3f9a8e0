"""JWT access token validation (and issuance for tooling/tests)

Customers authenticate against the hosted identity service, which issues
HS256-signed access tokens. This service only verifies them with the shared
secret; there is no login flow here.

JWT Token Claims Structure:
===========================

Standard JWT Claims:
- sub (Subject): User ID as UUID string
  Example: "550e8400-e29b-41d4-a716-446655440000"
  Purpose: Identifies the customer; also keys rate limiting

- aud (Audience): "authenticated" for signed-in customers
  Purpose: Rejects anonymous/service tokens signed with the same secret

- iat / exp: Issued-at and expiration Unix timestamps

Custom Claims:
- email: Customer's email address
- role: "authenticated" for customers, "admin" for back-office users

Example Token Payload:
{
  "sub": "550e8400-e29b-41d4-a716-446655440000",
  "aud": "authenticated",
  "role": "authenticated",
  "email": "jana@example.sk",
  "iat": 1704368400,
  "exp": 1704372000
}
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional
from uuid import UUID
import jwt


def _get_jwt_secret() -> str:
    """Get JWT_SECRET from environment.

    Raises:
        ValueError: If JWT_SECRET is not set
    """
    secret = os.getenv('JWT_SECRET')
    if not secret:
        raise ValueError("JWT_SECRET environment variable is not set")
    return secret


def _get_jwt_audience() -> str:
    return os.getenv('JWT_AUDIENCE', 'authenticated')


def _get_jwt_expiry_minutes() -> int:
    """Get JWT_EXPIRY_MINUTES from environment (default: 60)."""
    expiry = os.getenv('JWT_EXPIRY_MINUTES', '60')
    try:
        return int(expiry)
    except ValueError:
        return 60


def create_access_token(
    user_id: UUID,
    email: Optional[str] = None,
    role: str = "authenticated",
) -> str:
    """Create a signed access token in the identity service's format.

    Args:
        user_id: Customer's UUID
        email: Customer's email address
        role: Token role claim

    Returns:
        str: Signed JWT token

    Raises:
        ValueError: If JWT_SECRET is not set
    """
    secret = _get_jwt_secret()
    expiry_minutes = _get_jwt_expiry_minutes()

    now = datetime.now(timezone.utc)
    expiration = now + timedelta(minutes=expiry_minutes)

    payload = {
        'sub': str(user_id),
        'aud': _get_jwt_audience(),
        'role': role,
        'email': email,
        'iat': int(now.timestamp()),
        'exp': int(expiration.timestamp())
    }

    return jwt.encode(payload, secret, algorithm='HS256')


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and validate an access token.

    Args:
        token: JWT token string

    Returns:
        dict: Decoded token payload with claims

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid, tampered, or for another audience
        ValueError: If JWT_SECRET is not set
    """
    secret = _get_jwt_secret()

    try:
        return jwt.decode(
            token,
            secret,
            algorithms=['HS256'],
            audience=_get_jwt_audience(),
        )
    except jwt.ExpiredSignatureError:
        raise jwt.ExpiredSignatureError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise jwt.InvalidTokenError(f"Invalid token: {str(e)}")
