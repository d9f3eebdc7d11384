"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from showcase.domain.model import Comment
from showcase.domain.service import CommentService, ProfileService
from showcase.domain.value import ProfileId, WorkId


class CommentItem(BaseModel):
    """Comment in a response."""

    comment_id: str
    work_id: str
    user_id: str
    content: str
    author: str
    avatar: str | None
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            work_id=str(comment.work_id),
            user_id=str(comment.user_id),
            content=comment.content,
            author=comment.author,
            avatar=comment.avatar,
            created_at=comment.created_at,
        )


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    work_id: str
    user_id: str  # From the session
    content: str


class CreateCommentUseCase:
    """Use case for commenting on a work."""

    def __init__(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile domain service
        """
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the work or the commenting profile does not exist
        """
        author = await self.profile_service.get_by_id(
            ProfileId(UUID(request.user_id))
        )
        comment = await self.comment_service.add_comment(
            WorkId(UUID(request.work_id)), author, request.content
        )
        return CommentItem.from_comment(comment)
