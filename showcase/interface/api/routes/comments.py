"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from showcase.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from showcase.domain.service import JWTService
from showcase.interface.api.session import require_profile_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a work."""

    content: str = Field(max_length=10000)


@router.get("/works/{work_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    work_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Comments on a work, newest first."""
    return await get_comments_use_case.execute(GetCommentsRequest(work_id=str(work_id)))


@router.post(
    "/works/{work_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    work_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a work as the current profile."""
    user_id = require_profile_id(jwt_service, auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            work_id=str(work_id), user_id=user_id, content=request.content
        )
    )
