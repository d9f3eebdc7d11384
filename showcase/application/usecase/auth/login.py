"""Login and registration use cases."""

import logfire
from pydantic import BaseModel, Field

from showcase.application.usecase.common import ProfileInfo
from showcase.domain.error import ValidationError
from showcase.domain.service import JWTService, ProfileService
from showcase.domain.value import email_local_part, normalize_email


class LoginRequest(BaseModel):
    """Login request.

    username is only used if this email has no profile yet; when omitted it
    defaults to the email's local part.
    """

    email: str = Field(min_length=3, max_length=255)
    username: str | None = Field(default=None, max_length=255)


class RegisterRequest(BaseModel):
    """Registration request."""

    email: str = Field(min_length=3, max_length=255)
    username: str = Field(min_length=1, max_length=255)


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    profile: ProfileInfo


class LoginUseCase:
    """Use case for signing in with an email.

    Looks up the profile for the email, creating it on first login, and
    issues a session token for it.
    """

    def __init__(
        self, profile_service: ProfileService, jwt_service: JWTService
    ) -> None:
        """Initialize login use case.

        Args:
            profile_service: Profile domain service
            jwt_service: Session token domain service
        """
        self.profile_service = profile_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            ValidationError: If the email is malformed
            ProfileCreationError: If a new profile could not be stored
        """
        try:
            email = normalize_email(request.email)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        username = (request.username or "").strip() or email_local_part(email)

        with logfire.span("login.execute", email=email):
            profile = await self.profile_service.get_or_create_profile(
                email, username
            )
            token = self.jwt_service.create_token(
                profile_id=str(profile.id),
                username=profile.username,
                email=profile.email,
            )
            return LoginResponse(token=token, profile=ProfileInfo.from_profile(profile))


class RegisterUseCase:
    """Use case for registering with an email and a chosen username.

    Registering an email that already has a profile signs in to that profile
    instead of creating a second one.
    """

    def __init__(self, login_use_case: LoginUseCase) -> None:
        self.login_use_case = login_use_case

    async def execute(self, request: RegisterRequest) -> LoginResponse:
        """Execute registration flow.

        Raises:
            ValidationError: If the email is malformed or the username blank
            ProfileCreationError: If a new profile could not be stored
        """
        if not request.username.strip():
            raise ValidationError("username is required")

        return await self.login_use_case.execute(
            LoginRequest(email=request.email, username=request.username)
        )
