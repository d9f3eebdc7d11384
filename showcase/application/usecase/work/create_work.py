"""Create work use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from showcase.application.usecase.common import WorkItem
from showcase.domain.service import WorkService
from showcase.domain.value import FileType, ProfileId, WorkCategory


class CreateWorkRequest(BaseModel):
    """Create work request."""

    author_id: str  # From the session
    title: str
    description: str
    detailed_description: str | None = None
    category: WorkCategory
    file_type: FileType
    file_url: str  # External URL for web works, uploaded file URL otherwise


class CreateWorkUseCase:
    """Use case for submitting a new work."""

    def __init__(self, work_service: WorkService) -> None:
        """Initialize create work use case.

        Args:
            work_service: Work domain service
        """
        self.work_service = work_service

    async def execute(self, request: CreateWorkRequest) -> WorkItem:
        """Execute create work flow.

        Raises:
            ValidationError: If a required field is blank
        """
        with logfire.span("create_work.execute", author_id=request.author_id):
            work = await self.work_service.create_work(
                ProfileId(UUID(request.author_id)),
                request.model_dump(exclude={"author_id"}),
            )
            return WorkItem.from_work(work, has_voted=False)
