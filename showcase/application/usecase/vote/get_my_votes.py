"""Get my votes use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.domain.service import VoteService
from showcase.domain.value import ProfileId


class GetMyVotesRequest(BaseModel):
    """Get my votes request."""

    user_id: str  # From the session


class GetMyVotesResponse(BaseModel):
    """IDs of the works the profile voted for."""

    work_ids: list[str]


class GetMyVotesUseCase:
    """Use case for listing the works the current profile voted for."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetMyVotesRequest) -> GetMyVotesResponse:
        """Execute get my votes flow."""
        work_ids = await self.vote_service.get_voted_work_ids(
            ProfileId(UUID(request.user_id))
        )
        return GetMyVotesResponse(work_ids=[str(w) for w in work_ids])
