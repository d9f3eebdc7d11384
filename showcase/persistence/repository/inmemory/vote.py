"""In-memory vote repository for testing."""

from typing import List, Sequence

from showcase.domain.model import Vote
from showcase.domain.repository import VoteRepository
from showcase.domain.value import ProfileId, WorkId
from showcase.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def add_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless the pair already voted.

        No await separates the check from the insert, so this is atomic with
        respect to other coroutines.
        """
        for existing in self._db.votes.values():
            if existing.user_id == vote.user_id and existing.work_id == vote.work_id:
                return False

        self._db.votes[vote.id] = vote
        return True

    async def find_work_ids_by_user(self, user_id: ProfileId) -> List[WorkId]:
        """List the IDs of every work a profile voted for."""
        return [v.work_id for v in self._db.votes.values() if v.user_id == user_id]

    async def find_voted_work_ids(
        self, user_id: ProfileId, work_ids: Sequence[WorkId]
    ) -> set[WorkId]:
        """Batch check which of the given works a profile voted for."""
        wanted = set(work_ids)
        return {
            v.work_id
            for v in self._db.votes.values()
            if v.user_id == user_id and v.work_id in wanted
        }
