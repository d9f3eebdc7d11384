"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.common import ProfileInfo
from showcase.domain.service import JWTService, ProfileService
from showcase.domain.value import ProfileId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # Session token from the cookie


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    authenticated: bool
    profile: ProfileInfo | None = None


class GetCurrentUserUseCase:
    """Use case for resolving the session to a profile.

    Never fails: a missing, invalid or expired token, or a token for a
    profile that no longer exists, all read as "not authenticated".
    """

    def __init__(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: Session token domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow."""
        profile_id = self.jwt_service.get_profile_id_from_token(request.token)
        if not profile_id:
            return GetCurrentUserResponse(authenticated=False)

        try:
            profile_uuid = UUID(profile_id)
        except ValueError:
            return GetCurrentUserResponse(authenticated=False)

        profile = await self.profile_service.find_by_id(ProfileId(profile_uuid))
        if not profile:
            return GetCurrentUserResponse(authenticated=False)

        return GetCurrentUserResponse(
            authenticated=True, profile=ProfileInfo.from_profile(profile)
        )
