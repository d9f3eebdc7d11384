"""Work repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from showcase.domain.model.work import Work
from showcase.domain.value import ProfileId, WorkId


class WorkRepository(ABC):
    """Repository for Work aggregate.

    All reads return works joined with their author's username and avatar.
    """

    @abstractmethod
    async def find_by_id(self, work_id: WorkId) -> Optional[Work]:
        """Find a work by ID.

        Args:
            work_id: The work's unique identifier

        Returns:
            The work if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Work]:
        """Find every work, newest first.

        Returns:
            All works ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: ProfileId) -> List[Work]:
        """Find works by a specific author, newest first.

        Args:
            author_id: The author's profile ID

        Returns:
            The author's works ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, work: Work) -> Work:
        """Save a work (create or update).

        vote_count is never written by an update; it is owned by the vote
        ledger.

        Args:
            work: The work to save

        Returns:
            The stored work joined with its author's public fields
        """
        pass

    @abstractmethod
    async def delete_with_dependents(self, work_id: WorkId) -> bool:
        """Delete a work together with its votes and comments.

        Votes and comments are removed before the work so that no orphan
        remains once the call returns.

        Args:
            work_id: The work's unique identifier

        Returns:
            True if the work existed and was deleted
        """
        pass

    @abstractmethod
    async def increment_vote_count(self, work_id: WorkId) -> None:
        """Atomically increment vote_count by 1.

        A failure here must not undo an already stored vote.

        Args:
            work_id: The work's unique identifier
        """
        pass

    @abstractmethod
    async def reconcile_vote_counts(self) -> List[WorkId]:
        """Recompute every vote_count from the stored votes.

        Returns:
            IDs of the works whose counter was corrected
        """
        pass
