"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel

from showcase.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from showcase.application.usecase.common import ProfileInfo
from showcase.config import Settings
from showcase.interface.api.session import clear_session_cookie, set_session_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class SessionResponse(BaseModel):
    """Profile signed in by login or registration.

    The token itself travels only in the HTTP-only cookie.
    """

    authenticated: bool
    profile: ProfileInfo


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post("/login", response_model=SessionResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Sign in with an email, creating the profile on first login.

    Example:
        POST /auth/login
        {"email": "alice@example.com"}

        Response (cookie auth_token set):
        {"authenticated": true, "profile": {"id": "...", "username": "alice", ...}}
    """
    result = await login_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    logger.info(f"Session started for profile {result.profile.id}")
    return SessionResponse(authenticated=True, profile=result.profile)


@router.post("/register", response_model=SessionResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Register with an email and username.

    Registering an email that already has a profile signs in to it.
    """
    result = await register_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    logger.info(f"Session started for profile {result.profile.id}")
    return SessionResponse(authenticated=True, profile=result.profile)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Log out by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the current profile, or an unauthenticated status.

    Safe to call without a session: returns authenticated=false instead of
    an error.
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
