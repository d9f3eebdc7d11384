"""Update avatar use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from showcase.application.usecase.common import ProfileInfo
from showcase.domain.service import ProfileService
from showcase.domain.value import ProfileId


class UpdateAvatarRequest(BaseModel):
    """Update avatar request."""

    profile_id: str  # From the session, never from the body
    avatar_url: str | None = None


class UpdateAvatarUseCase:
    """Use case for changing the only mutable profile field."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: UpdateAvatarRequest) -> ProfileInfo:
        """Execute update avatar flow.

        A blank avatar_url clears the avatar.

        Raises:
            NotFoundError: If the profile does not exist
        """
        avatar_url = (request.avatar_url or "").strip() or None
        with logfire.span("update_avatar.execute", profile_id=request.profile_id):
            profile = await self.profile_service.update_avatar(
                ProfileId(UUID(request.profile_id)), avatar_url
            )
            return ProfileInfo.from_profile(profile)
