"""In-memory work repository for testing."""

from typing import List, Optional

from showcase.domain.model import Work
from showcase.domain.repository import WorkRepository
from showcase.domain.value import ProfileId, WorkId
from showcase.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryWorkRepository(WorkRepository):
    """In-memory implementation of WorkRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    def _with_author(self, work: Work) -> Work:
        author = self._db.profiles.get(work.author_id)
        return work.model_copy(
            update={
                "author_username": author.username if author else None,
                "author_avatar_url": author.avatar_url if author else None,
            }
        )

    def _newest_first(self, works: List[Work]) -> List[Work]:
        ordered = sorted(works, key=lambda w: w.created_at, reverse=True)
        return [self._with_author(w) for w in ordered]

    async def find_by_id(self, work_id: WorkId) -> Optional[Work]:
        """Find a work by ID."""
        work = self._db.works.get(work_id)
        return self._with_author(work) if work else None

    async def find_all(self) -> List[Work]:
        """Find every work, newest first."""
        return self._newest_first(list(self._db.works.values()))

    async def find_by_author(self, author_id: ProfileId) -> List[Work]:
        """Find works by a specific author, newest first."""
        return self._newest_first(
            [w for w in self._db.works.values() if w.author_id == author_id]
        )

    async def save(self, work: Work) -> Work:
        """Save a work, keeping the stored vote_count on update."""
        existing = self._db.works.get(work.id)
        if existing:
            work = work.model_copy(
                update={
                    "vote_count": existing.vote_count,
                    "created_at": existing.created_at,
                }
            )

        stored = work.model_copy(
            update={"author_username": None, "author_avatar_url": None}
        )
        self._db.works[work.id] = stored
        return self._with_author(stored)

    async def delete_with_dependents(self, work_id: WorkId) -> bool:
        """Delete votes, then comments, then the work itself."""
        for vote_id in [v.id for v in self._db.votes.values() if v.work_id == work_id]:
            del self._db.votes[vote_id]
        for comment_id in [
            c.id for c in self._db.comments.values() if c.work_id == work_id
        ]:
            del self._db.comments[comment_id]
        return self._db.works.pop(work_id, None) is not None

    async def increment_vote_count(self, work_id: WorkId) -> None:
        """Increment vote_count by 1."""
        work = self._db.works.get(work_id)
        if work:
            self._db.works[work_id] = work.model_copy(
                update={"vote_count": work.vote_count + 1}
            )

    async def reconcile_vote_counts(self) -> List[WorkId]:
        """Rewrite every vote_count that disagrees with the stored votes."""
        corrected: List[WorkId] = []
        for work_id, work in list(self._db.works.items()):
            actual = sum(1 for v in self._db.votes.values() if v.work_id == work_id)
            if work.vote_count != actual:
                self._db.works[work_id] = work.model_copy(
                    update={"vote_count": actual}
                )
                corrected.append(work_id)
        return corrected
