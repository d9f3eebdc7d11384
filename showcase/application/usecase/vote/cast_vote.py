"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.inflight import VoteInFlightRegistry
from showcase.domain.error import AlreadyVotedError
from showcase.domain.service import VoteService
from showcase.domain.value import ProfileId, VoteOutcome, WorkId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    work_id: str
    user_id: str  # From the session


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    work_id: str
    vote_count: int
    voted: bool


class CastVoteUseCase:
    """Use case for voting for a work."""

    def __init__(
        self, vote_service: VoteService, in_flight: VoteInFlightRegistry
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            in_flight: Registry of votes being processed in this process
        """
        self.vote_service = vote_service
        self.in_flight = in_flight

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            VoteInProgressError: If the same vote is already being processed
            AlreadyVotedError: If the profile already voted for this work
            NotFoundError: If the work does not exist
        """
        work_id = WorkId(UUID(request.work_id))
        user_id = ProfileId(UUID(request.user_id))

        with self.in_flight.claim(user_id, work_id):
            outcome, work = await self.vote_service.cast_vote(work_id, user_id)

        if outcome is VoteOutcome.ALREADY_VOTED:
            raise AlreadyVotedError(request.work_id)

        return CastVoteResponse(
            work_id=str(work.id), vote_count=work.vote_count, voted=True
        )
