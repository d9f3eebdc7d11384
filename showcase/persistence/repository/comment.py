"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Comment
from showcase.domain.repository import CommentRepository
from showcase.domain.value import WorkId
from showcase.persistence.mappers import comment_to_dict, row_to_comment
from showcase.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_work(self, work_id: WorkId) -> List[Comment]:
        """Find all comments for a work, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.work_id == work_id)
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Append a comment.

        Raises:
            IntegrityError: If the work or the author no longer exists
        """
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return comment
