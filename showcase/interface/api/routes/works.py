"""Work routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from showcase.application.usecase.common import WorkItem
from showcase.application.usecase.work import (
    CreateWorkRequest,
    CreateWorkUseCase,
    DeleteWorkRequest,
    DeleteWorkUseCase,
    GetMediaRequest,
    GetMediaUseCase,
    GetWorkRequest,
    GetWorkUseCase,
    ListGalleryRequest,
    ListGalleryResponse,
    ListGalleryUseCase,
    UpdateWorkRequest,
    UpdateWorkUseCase,
)
from showcase.domain.model import MediaPresentation
from showcase.domain.service import JWTService
from showcase.domain.value import ALL_CATEGORIES, FileType, WorkCategory
from showcase.interface.api.session import require_profile_id

router = APIRouter(prefix="/works", tags=["works"], route_class=DishkaRoute)


class CreateWorkAPIRequest(BaseModel):
    """API request for submitting a work."""

    title: str = Field(max_length=300)
    description: str = Field(max_length=10000)
    detailed_description: str | None = Field(None, max_length=50000)
    category: WorkCategory
    file_type: FileType
    file_url: str


class UpdateWorkAPIRequest(BaseModel):
    """API request for editing a work. Omitted fields are left unchanged."""

    title: str | None = Field(None, max_length=300)
    description: str | None = Field(None, max_length=10000)
    detailed_description: str | None = Field(None, max_length=50000)
    category: WorkCategory | None = None
    file_type: FileType | None = None
    file_url: str | None = None


@router.get("", response_model=ListGalleryResponse)
async def list_gallery(
    list_gallery_use_case: FromDishka[ListGalleryUseCase],
    jwt_service: FromDishka[JWTService],
    q: str = Query(default="", max_length=200),
    category: str = Query(default=ALL_CATEGORIES),
    auth_token: str | None = Cookie(default=None),
) -> ListGalleryResponse:
    """Gallery of all works filtered by text and category, most votes first.

    Example:
        GET /works?q=robot&category=robotics
    """
    return await list_gallery_use_case.execute(
        ListGalleryRequest(
            query=q,
            category=category,
            viewer_id=jwt_service.get_profile_id_from_token(auth_token),
        )
    )


@router.post("", response_model=WorkItem, status_code=status.HTTP_201_CREATED)
async def create_work(
    request: CreateWorkAPIRequest,
    create_work_use_case: FromDishka[CreateWorkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> WorkItem:
    """Submit a work owned by the current profile."""
    author_id = require_profile_id(jwt_service, auth_token)
    return await create_work_use_case.execute(
        CreateWorkRequest(author_id=author_id, **request.model_dump())
    )


@router.get("/{work_id}", response_model=WorkItem)
async def get_work(
    work_id: UUID,
    get_work_use_case: FromDishka[GetWorkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> WorkItem:
    """Get a single work."""
    return await get_work_use_case.execute(
        GetWorkRequest(
            work_id=str(work_id),
            viewer_id=jwt_service.get_profile_id_from_token(auth_token),
        )
    )


@router.patch("/{work_id}", response_model=WorkItem)
async def update_work(
    work_id: UUID,
    request: UpdateWorkAPIRequest,
    update_work_use_case: FromDishka[UpdateWorkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> WorkItem:
    """Edit a work. Only its author may do this."""
    actor_id = require_profile_id(jwt_service, auth_token)
    return await update_work_use_case.execute(
        UpdateWorkRequest(
            work_id=str(work_id),
            actor_id=actor_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{work_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_work(
    work_id: UUID,
    delete_work_use_case: FromDishka[DeleteWorkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a work with its votes and comments. Only its author may do this."""
    actor_id = require_profile_id(jwt_service, auth_token)
    await delete_work_use_case.execute(
        DeleteWorkRequest(work_id=str(work_id), actor_id=actor_id)
    )


@router.get("/{work_id}/media", response_model=MediaPresentation)
async def get_media(
    work_id: UUID,
    get_media_use_case: FromDishka[GetMediaUseCase],
) -> MediaPresentation:
    """How the work's file should be rendered, with its download link."""
    return await get_media_use_case.execute(GetMediaRequest(work_id=str(work_id)))
