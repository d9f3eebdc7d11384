"""Comment domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from showcase.domain.error import NotFoundError, ValidationError
from showcase.domain.model import Comment, Profile, utc_now
from showcase.domain.repository import CommentRepository, WorkRepository
from showcase.domain.value import CommentId, WorkId, email_local_part

from .base import Service
from .profile_service import ProfileService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        work_repository: WorkRepository,
        profile_service: ProfileService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            work_repository: Work repository
            profile_service: Profile domain service (placeholder avatars)
        """
        self.comment_repository = comment_repository
        self.work_repository = work_repository
        self.profile_service = profile_service

    def author_snapshot(self, profile: Profile) -> tuple[str, str]:
        """Display name and avatar recorded on a comment at write time.

        The name falls back to the email local part, the avatar to the
        placeholder for that name.
        """
        author = profile.username.strip() or email_local_part(profile.email)
        avatar = profile.avatar_url or self.profile_service.placeholder_avatar(author)
        return author, avatar

    async def add_comment(
        self, work_id: WorkId, author: Profile, content: str
    ) -> Comment:
        """Append a comment to a work.

        Args:
            work_id: Work being commented on
            author: Commenting profile
            content: Comment text

        Returns:
            The stored comment

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If the work or the commenting profile does not exist
        """
        with logfire.span(
            "comment_service.add_comment", work_id=str(work_id), user_id=str(author.id)
        ):
            text = content.strip()
            if not text:
                raise ValidationError("Comment content is required")

            work = await self.work_repository.find_by_id(work_id)
            if not work:
                logfire.warn("Comment on non-existent work", work_id=str(work_id))
                raise NotFoundError("Work", str(work_id))

            name, avatar = self.author_snapshot(author)
            comment = Comment(
                id=CommentId(uuid4()),
                work_id=work_id,
                user_id=author.id,
                content=text,
                author=name,
                avatar=avatar,
                created_at=utc_now(),
            )

            try:
                saved = await self.comment_repository.save(comment)
            except IntegrityError as e:
                logfire.warn("Comment insert lost its target", error=str(e))
                if not await self.work_repository.find_by_id(work_id):
                    raise NotFoundError("Work", str(work_id)) from e
                raise NotFoundError("Profile", str(author.id)) from e

            logfire.info("Comment added", comment_id=str(saved.id), work_id=str(work_id))
            return saved

    async def list_comments(self, work_id: WorkId) -> list[Comment]:
        """Comments on a work, newest first."""
        return await self.comment_repository.find_by_work(work_id)
