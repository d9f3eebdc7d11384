"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Profile, utc_now
from showcase.domain.repository import ProfileRepository
from showcase.domain.value import ProfileId
from showcase.persistence.mappers import profile_to_dict, row_to_profile
from showcase.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[Profile]:
        """Find a profile by its email."""
        stmt = select(profiles_table).where(profiles_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Insert a profile.

        The insert runs in a SAVEPOINT so that a unique violation leaves the
        transaction usable for re-reading the existing row.

        Raises:
            IntegrityError: On uq_profiles_email violation
        """
        stmt = profiles_table.insert().values(**profile_to_dict(profile))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return profile

    async def update_avatar(
        self, profile_id: ProfileId, avatar_url: Optional[str]
    ) -> Optional[Profile]:
        """Replace a profile's avatar."""
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == profile_id)
            .values(avatar_url=avatar_url, updated_at=utc_now())
            .returning(*profiles_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_profile(dict(row)) if row else None
