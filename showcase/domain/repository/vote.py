"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from showcase.domain.model.vote import Vote
from showcase.domain.value import ProfileId, WorkId


class VoteRepository(ABC):
    """Repository for Vote entity.

    The (user_id, work_id) pair is unique at the storage layer.
    """

    @abstractmethod
    async def add_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless one already exists for the same pair.

        The existence check and the insert are a single atomic operation, so
        concurrent calls for the same pair store at most one vote.

        Args:
            vote: The vote to store

        Returns:
            True if the vote was inserted, False if the pair already voted
        """
        pass

    @abstractmethod
    async def find_work_ids_by_user(self, user_id: ProfileId) -> List[WorkId]:
        """List the IDs of every work a profile voted for.

        Args:
            user_id: The voter's profile ID

        Returns:
            Work IDs
        """
        pass

    @abstractmethod
    async def find_voted_work_ids(
        self, user_id: ProfileId, work_ids: Sequence[WorkId]
    ) -> set[WorkId]:
        """Batch check which of the given works a profile voted for.

        Args:
            user_id: The voter's profile ID
            work_ids: Work IDs to check

        Returns:
            The subset of work_ids the profile voted for
        """
        pass
