"""In-memory profile repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from showcase.domain.model import Profile, utc_now
from showcase.domain.repository import ProfileRepository
from showcase.domain.value import ProfileId
from showcase.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._db.profiles.get(profile_id)

    async def find_by_email(self, email: str) -> Optional[Profile]:
        """Find a profile by its email."""
        for profile in self._db.profiles.values():
            if profile.email == email:
                return profile
        return None

    async def save(self, profile: Profile) -> Profile:
        """Insert a profile.

        Raises:
            IntegrityError: If the email is already taken
        """
        if await self.find_by_email(profile.email):
            raise IntegrityError("Duplicate profile email", None, Exception())

        self._db.profiles[profile.id] = profile
        return profile

    async def update_avatar(
        self, profile_id: ProfileId, avatar_url: Optional[str]
    ) -> Optional[Profile]:
        """Replace a profile's avatar."""
        profile = self._db.profiles.get(profile_id)
        if not profile:
            return None

        updated = profile.model_copy(
            update={"avatar_url": avatar_url, "updated_at": utc_now()}
        )
        self._db.profiles[profile_id] = updated
        return updated
