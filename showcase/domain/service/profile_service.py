"""Profile domain service."""

from uuid import uuid4

import logfire
import pydantic
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from showcase.config import StorageSettings
from showcase.domain.error import NotFoundError, ProfileCreationError, ValidationError
from showcase.domain.model import Profile, utc_now
from showcase.domain.repository import ProfileRepository
from showcase.domain.value import ProfileId, placeholder_avatar_url

from .base import Service


class ProfileService(Service):
    """Domain service for profile operations.

    Resolves an email to exactly one profile, creating it on first sight.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        storage_settings: StorageSettings,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            storage_settings: Storage settings (placeholder avatar endpoint)
        """
        self.profile_repository = profile_repository
        self.storage_settings = storage_settings

    def placeholder_avatar(self, seed: str) -> str:
        """Deterministic placeholder avatar URL for a seed."""
        return placeholder_avatar_url(seed, self.storage_settings.avatar_base_url)

    async def get_or_create_profile(self, email: str, username: str) -> Profile:
        """Return the profile for an email, creating it if absent.

        A concurrent create for the same email loses on the unique constraint
        and re-reads the winner's row.

        Args:
            email: Normalized email address
            username: Display name used only when a profile is created

        Returns:
            The one profile for this email

        Raises:
            ValidationError: If the username or email is too long for a profile
            ProfileCreationError: If the profile could not be stored
        """
        with logfire.span("profile_service.get_or_create_profile", email=email):
            existing = await self.profile_repository.find_by_email(email)
            if existing:
                logfire.info("Existing profile found", profile_id=str(existing.id))
                return existing

            now = utc_now()
            try:
                profile = Profile(
                    id=ProfileId(uuid4()),
                    username=username,
                    email=email,
                    avatar_url=self.placeholder_avatar(username),
                    created_at=now,
                    updated_at=now,
                )
            except pydantic.ValidationError as e:
                raise ValidationError(str(e)) from e

            try:
                created = await self.profile_repository.save(profile)
            except IntegrityError:
                winner = await self.profile_repository.find_by_email(email)
                if winner:
                    logfire.info(
                        "Concurrent profile create resolved",
                        profile_id=str(winner.id),
                    )
                    return winner
                logfire.error("Profile create conflicted without a winner", email=email)
                raise ProfileCreationError(email)
            except SQLAlchemyError as e:
                logfire.error("Profile creation failed", email=email, error=str(e))
                raise ProfileCreationError(email) from e

            logfire.info(
                "Profile created", profile_id=str(created.id), username=username
            )
            return created

    async def get_by_id(self, profile_id: ProfileId) -> Profile:
        """Get a profile by ID.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.get_by_id", profile_id=str(profile_id)):
            profile = await self.profile_repository.find_by_id(profile_id)
            if not profile:
                logfire.warn("Profile not found", profile_id=str(profile_id))
                raise NotFoundError("Profile", str(profile_id))
            return profile

    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        """Get a profile by ID, or None if absent."""
        return await self.profile_repository.find_by_id(profile_id)

    async def update_avatar(
        self, profile_id: ProfileId, avatar_url: str | None
    ) -> Profile:
        """Replace a profile's avatar.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.update_avatar", profile_id=str(profile_id)):
            updated = await self.profile_repository.update_avatar(
                profile_id, avatar_url
            )
            if not updated:
                raise NotFoundError("Profile", str(profile_id))
            logfire.info("Avatar updated", profile_id=str(profile_id))
            return updated
