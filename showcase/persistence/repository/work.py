"""PostgreSQL implementation of Work repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Work
from showcase.domain.repository import WorkRepository
from showcase.domain.value import ProfileId, WorkId
from showcase.persistence.mappers import row_to_work, work_to_dict
from showcase.persistence.tables import (
    comments_table,
    profiles_table,
    votes_table,
    works_table,
)

# Columns written by an update; vote_count and created_at are never rewritten
_MUTABLE_COLUMNS = (
    "title",
    "description",
    "detailed_description",
    "category",
    "file_url",
    "file_type",
    "updated_at",
)


def _select_works():
    """Works joined with the author's public profile fields."""
    return select(
        works_table,
        profiles_table.c.username.label("author_username"),
        profiles_table.c.avatar_url.label("author_avatar_url"),
    ).select_from(
        works_table.outerjoin(
            profiles_table, works_table.c.author_id == profiles_table.c.id
        )
    )


class PostgresWorkRepository(WorkRepository):
    """PostgreSQL implementation of WorkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, work_id: WorkId) -> Optional[Work]:
        """Find a work by ID."""
        with logfire.span("work_repository.find_by_id", work_id=str(work_id)):
            stmt = _select_works().where(works_table.c.id == work_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Work not found", work_id=str(work_id))
                return None

            return row_to_work(dict(row))

    async def find_all(self) -> List[Work]:
        """Find every work, newest first."""
        with logfire.span("work_repository.find_all"):
            stmt = _select_works().order_by(desc(works_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_work(dict(row)) for row in result.mappings().all()]

    async def find_by_author(self, author_id: ProfileId) -> List[Work]:
        """Find works by a specific author, newest first."""
        stmt = (
            _select_works()
            .where(works_table.c.author_id == author_id)
            .order_by(desc(works_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_work(dict(row)) for row in result.mappings().all()]

    async def save(self, work: Work) -> Work:
        """Save a work (create or update).

        Raises:
            IntegrityError: If the author's profile no longer exists
        """
        work_dict = work_to_dict(work)

        exists = await self.session.scalar(
            select(works_table.c.id).where(works_table.c.id == work.id)
        )
        if exists:
            stmt = (
                update(works_table)
                .where(works_table.c.id == work.id)
                .values(**{k: work_dict[k] for k in _MUTABLE_COLUMNS})
            )
        else:
            stmt = works_table.insert().values(**work_dict)

        async with self.session.begin_nested():
            await self.session.execute(stmt)

        saved = await self.find_by_id(work.id)
        return saved if saved else work

    async def delete_with_dependents(self, work_id: WorkId) -> bool:
        """Delete votes, then comments, then the work itself."""
        with logfire.span(
            "work_repository.delete_with_dependents", work_id=str(work_id)
        ):
            await self.session.execute(
                delete(votes_table).where(votes_table.c.work_id == work_id)
            )
            await self.session.execute(
                delete(comments_table).where(comments_table.c.work_id == work_id)
            )
            result = await self.session.execute(
                delete(works_table).where(works_table.c.id == work_id)
            )
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_vote_count(self, work_id: WorkId) -> None:
        """Atomically increment vote_count by 1.

        Runs inside a SAVEPOINT so a failure rolls back only the increment and
        leaves the surrounding transaction (and the stored vote) intact.
        """
        async with self.session.begin_nested():
            stmt = (
                update(works_table)
                .where(works_table.c.id == work_id)
                .values(vote_count=works_table.c.vote_count + 1)
            )
            await self.session.execute(stmt)

    async def reconcile_vote_counts(self) -> List[WorkId]:
        """Rewrite every vote_count that disagrees with the votes table."""
        actual = (
            select(func.count(votes_table.c.id))
            .where(votes_table.c.work_id == works_table.c.id)
            .scalar_subquery()
        )
        stmt = (
            update(works_table)
            .where(works_table.c.vote_count != actual)
            .values(vote_count=actual)
            .returning(works_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return [WorkId(row.id) for row in result.fetchall()]
