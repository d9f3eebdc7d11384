"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from showcase.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetMyVotesRequest,
    GetMyVotesResponse,
    GetMyVotesUseCase,
)
from showcase.domain.service import JWTService
from showcase.interface.api.session import require_profile_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/works/{work_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    work_id: UUID,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote for a work. One vote per profile per work.

    Returns 409 if the profile already voted or the same vote is still being
    processed.
    """
    user_id = require_profile_id(jwt_service, auth_token)
    return await cast_vote_use_case.execute(
        CastVoteRequest(work_id=str(work_id), user_id=user_id)
    )


@router.get("/votes/me", response_model=GetMyVotesResponse)
async def get_my_votes(
    get_my_votes_use_case: FromDishka[GetMyVotesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetMyVotesResponse:
    """IDs of the works the current profile voted for."""
    user_id = require_profile_id(jwt_service, auth_token)
    return await get_my_votes_use_case.execute(GetMyVotesRequest(user_id=user_id))
