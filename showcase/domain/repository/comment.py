"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from showcase.domain.model.comment import Comment
from showcase.domain.value import WorkId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are append-only: there is no update or single delete.
    """

    @abstractmethod
    async def find_by_work(self, work_id: WorkId) -> List[Comment]:
        """Find all comments for a work, newest first.

        Args:
            work_id: The work's ID

        Returns:
            Comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Append a comment.

        Args:
            comment: The comment to store

        Returns:
            The stored comment
        """
        pass
