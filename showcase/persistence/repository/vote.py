"""PostgreSQL implementation of Vote repository."""

from typing import List, Sequence

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Vote
from showcase.domain.repository import VoteRepository
from showcase.domain.value import ProfileId, WorkId
from showcase.persistence.mappers import row_to_vote, vote_to_dict
from showcase.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add_if_absent(self, vote: Vote) -> bool:
        """Insert a vote, doing nothing on uq_votes_user_work conflict.

        Runs in a SAVEPOINT so a foreign-key violation (work or profile gone)
        leaves the request's transaction usable.

        Raises:
            IntegrityError: If the work or the voter no longer exists
        """
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(constraint="uq_votes_user_work")
            .returning(votes_table.c.id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            inserted = result.first() is not None
        return inserted

    async def find_work_ids_by_user(self, user_id: ProfileId) -> List[WorkId]:
        """List the IDs of every work a profile voted for."""
        stmt = select(votes_table.c.work_id).where(votes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [WorkId(row.work_id) for row in result.fetchall()]

    async def find_voted_work_ids(
        self, user_id: ProfileId, work_ids: Sequence[WorkId]
    ) -> set[WorkId]:
        """Batch check which of the given works a profile voted for."""
        if not work_ids:
            return set()

        stmt = select(votes_table.c.work_id).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.work_id.in_(work_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {WorkId(row.work_id) for row in result.fetchall()}
