"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.domain.service import CommentService, WorkService
from showcase.domain.value import WorkId

from .create_comment import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    work_id: str


class GetCommentsResponse(BaseModel):
    """Comments on a work, newest first."""

    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for reading a work's comment log."""

    def __init__(
        self, comment_service: CommentService, work_service: WorkService
    ) -> None:
        self.comment_service = comment_service
        self.work_service = work_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the work does not exist
        """
        work = await self.work_service.get_work(WorkId(UUID(request.work_id)))
        comments = await self.comment_service.list_comments(work.id)
        return GetCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in comments],
            total=len(comments),
        )
