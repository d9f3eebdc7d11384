"""Session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from showcase.config import AuthSettings


class TokenPayload(BaseModel):
    """Session token payload.

    Carries only what is needed to identify the profile; display fields are
    re-read from the profile store on /auth/me.
    """

    profile_id: str
    username: str
    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    profile_id: str, username: str, email: str, settings: AuthSettings
) -> str:
    """Create a session token for a profile.

    Args:
        profile_id: Profile ID
        username: Profile username
        email: Profile email
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "profile_id": profile_id,
        "username": username,
        "email": email,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
