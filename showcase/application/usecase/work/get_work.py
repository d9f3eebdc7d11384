"""Get work use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.common import WorkItem
from showcase.domain.service import VoteService, WorkService
from showcase.domain.value import ProfileId, WorkId


class GetWorkRequest(BaseModel):
    """Get work request."""

    work_id: str
    viewer_id: str | None = None  # Current profile ID (if authenticated)


class GetWorkUseCase:
    """Use case for reading a single work."""

    def __init__(self, work_service: WorkService, vote_service: VoteService) -> None:
        """Initialize get work use case.

        Args:
            work_service: Work domain service
            vote_service: Vote domain service
        """
        self.work_service = work_service
        self.vote_service = vote_service

    async def execute(self, request: GetWorkRequest) -> WorkItem:
        """Execute get work flow.

        Raises:
            NotFoundError: If the work does not exist
        """
        work = await self.work_service.get_work(WorkId(UUID(request.work_id)))

        has_voted = None
        if request.viewer_id:
            voted = await self.vote_service.get_user_votes_for_works(
                ProfileId(UUID(request.viewer_id)), [work.id]
            )
            has_voted = voted.get(work.id, False)

        return WorkItem.from_work(work, has_voted=has_voted)
