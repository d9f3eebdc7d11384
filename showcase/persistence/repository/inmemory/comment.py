"""In-memory comment repository for testing."""

from typing import List

from showcase.domain.model import Comment
from showcase.domain.repository import CommentRepository
from showcase.domain.value import WorkId
from showcase.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_work(self, work_id: WorkId) -> List[Comment]:
        """Find all comments for a work, newest first."""
        comments = [c for c in self._db.comments.values() if c.work_id == work_id]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Append a comment."""
        self._db.comments[comment.id] = comment
        return comment
