"""Profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from showcase.application.usecase.common import ProfileInfo
from showcase.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ListProfileWorksRequest,
    ListProfileWorksResponse,
    ListProfileWorksUseCase,
    UpdateAvatarRequest,
    UpdateAvatarUseCase,
)
from showcase.domain.service import JWTService
from showcase.interface.api.session import require_profile_id

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class UpdateAvatarAPIRequest(BaseModel):
    """API request for changing the avatar."""

    avatar_url: str | None = None


@router.patch("/me", response_model=ProfileInfo)
async def update_my_avatar(
    request: UpdateAvatarAPIRequest,
    update_avatar_use_case: FromDishka[UpdateAvatarUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProfileInfo:
    """Change the current profile's avatar (its only mutable field)."""
    profile_id = require_profile_id(jwt_service, auth_token)
    return await update_avatar_use_case.execute(
        UpdateAvatarRequest(profile_id=profile_id, avatar_url=request.avatar_url)
    )


@router.get("/me/works", response_model=ListProfileWorksResponse)
async def list_my_works(
    list_profile_works_use_case: FromDishka[ListProfileWorksUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListProfileWorksResponse:
    """List the current profile's works, newest first."""
    profile_id = require_profile_id(jwt_service, auth_token)
    return await list_profile_works_use_case.execute(
        ListProfileWorksRequest(profile_id=profile_id, viewer_id=profile_id)
    )


@router.get("/{profile_id}", response_model=ProfileInfo)
async def get_profile(
    profile_id: UUID,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileInfo:
    """Get a public profile."""
    return await get_profile_use_case.execute(
        GetProfileRequest(profile_id=str(profile_id))
    )


@router.get("/{profile_id}/works", response_model=ListProfileWorksResponse)
async def list_profile_works(
    profile_id: UUID,
    list_profile_works_use_case: FromDishka[ListProfileWorksUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListProfileWorksResponse:
    """List an author's works, newest first."""
    return await list_profile_works_use_case.execute(
        ListProfileWorksRequest(
            profile_id=str(profile_id),
            viewer_id=jwt_service.get_profile_id_from_token(auth_token),
        )
    )
