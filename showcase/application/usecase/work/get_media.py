"""Get media presentation use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.domain.model import MediaPresentation
from showcase.domain.service import WorkService, present_media
from showcase.domain.value import WorkId


class GetMediaRequest(BaseModel):
    """Get media request."""

    work_id: str


class GetMediaUseCase:
    """Use case for describing how a work's file should be rendered."""

    def __init__(self, work_service: WorkService) -> None:
        self.work_service = work_service

    async def execute(self, request: GetMediaRequest) -> MediaPresentation:
        """Execute get media flow.

        Raises:
            NotFoundError: If the work does not exist
        """
        work = await self.work_service.get_work(WorkId(UUID(request.work_id)))
        return present_media(work.file_url, work.file_type, work.title)
