"""Update work use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from showcase.application.usecase.common import WorkItem
from showcase.domain.service import WorkService
from showcase.domain.value import FileType, ProfileId, WorkCategory, WorkId


class UpdateWorkRequest(BaseModel):
    """Update work request.

    Only fields that were explicitly set are applied.
    """

    work_id: str
    actor_id: str  # From the session
    title: str | None = None
    description: str | None = None
    detailed_description: str | None = None
    category: WorkCategory | None = None
    file_type: FileType | None = None
    file_url: str | None = None


class UpdateWorkUseCase:
    """Use case for an author editing their work."""

    def __init__(self, work_service: WorkService) -> None:
        self.work_service = work_service

    async def execute(self, request: UpdateWorkRequest) -> WorkItem:
        """Execute update work flow.

        Raises:
            NotFoundError: If the work does not exist
            NotAuthorizedError: If the actor is not the author
            ValidationError: If the merged record is invalid
        """
        changes = request.model_dump(
            exclude={"work_id", "actor_id"}, exclude_unset=True
        )
        with logfire.span("update_work.execute", work_id=request.work_id):
            work = await self.work_service.update_work(
                WorkId(UUID(request.work_id)),
                ProfileId(UUID(request.actor_id)),
                changes,
            )
            return WorkItem.from_work(work)
