"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from showcase.domain.model.profile import Profile
from showcase.domain.value import ProfileId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    Defines the contract for profile persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Profile]:
        """Find a profile by its (normalized) email.

        Args:
            email: Normalized email address

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Create a profile.

        Args:
            profile: The profile to create

        Returns:
            The stored profile

        Raises:
            IntegrityError: If a profile with the same email already exists
        """
        pass

    @abstractmethod
    async def update_avatar(
        self, profile_id: ProfileId, avatar_url: Optional[str]
    ) -> Optional[Profile]:
        """Replace a profile's avatar and refresh updated_at.

        Args:
            profile_id: The profile's unique identifier
            avatar_url: New avatar URL (None to clear)

        Returns:
            The updated profile, or None if it does not exist
        """
        pass
