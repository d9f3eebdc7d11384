"""Delete work use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.domain.service import WorkService
from showcase.domain.value import ProfileId, WorkId


class DeleteWorkRequest(BaseModel):
    """Delete work request."""

    work_id: str
    actor_id: str  # From the session


class DeleteWorkUseCase:
    """Use case for an author deleting their work with its votes and comments."""

    def __init__(self, work_service: WorkService) -> None:
        self.work_service = work_service

    async def execute(self, request: DeleteWorkRequest) -> None:
        """Execute delete work flow.

        Raises:
            NotFoundError: If the work does not exist
            NotAuthorizedError: If the actor is not the author
        """
        await self.work_service.delete_work(
            WorkId(UUID(request.work_id)), ProfileId(UUID(request.actor_id))
        )
