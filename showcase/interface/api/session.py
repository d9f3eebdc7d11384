"""Session cookie helpers shared by the routes."""

from fastapi import HTTPException, Response, status

from showcase.config import Settings
from showcase.domain.service import JWTService

AUTH_COOKIE = "auth_token"


def require_profile_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Profile ID of the session, or 401.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    profile_id = jwt_service.get_profile_id_from_token(auth_token)
    if not profile_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return profile_id


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie.

    Production cookies are cross-site (SameSite=None) and therefore Secure.
    """
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        domain=settings.auth.cookie_domain if settings.is_production else None,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Delete the session cookie with the same domain/path it was set with."""
    response.delete_cookie(
        key=AUTH_COOKIE,
        domain=settings.auth.cookie_domain if settings.is_production else None,
        path="/",
    )
