"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from showcase.config import StorageSettings
from showcase.domain.error import NotFoundError, ProfileCreationError, ValidationError
from showcase.domain.model import Profile
from showcase.domain.repository import ProfileRepository
from showcase.domain.service import ProfileService
from showcase.domain.value import ProfileId
from showcase.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryProfileRepository,
)
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RacingProfileRepository(InMemoryProfileRepository):
    """Simulates a concurrent login that inserts the same email first."""

    def __init__(self, db: InMemoryDatabase, winner: Profile) -> None:
        super().__init__(db)
        self.winner = winner

    async def save(self, profile: Profile) -> Profile:
        self._db.profiles[self.winner.id] = self.winner
        raise IntegrityError("INSERT INTO profiles", {}, Exception("duplicate key"))


class BrokenProfileRepository(InMemoryProfileRepository):
    """Profile store that rejects every insert."""

    async def save(self, profile: Profile) -> Profile:
        raise OperationalError("INSERT INTO profiles", {}, Exception("timeout"))


class TestGetOrCreateProfile:
    """Tests for get_or_create_profile."""

    @pytest.mark.asyncio
    async def test_first_login_creates_profile_with_placeholder_avatar(
        self, unit_env
    ):
        """A new email gets a profile seeded with a placeholder avatar."""
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.get_or_create_profile(
            "alice@example.com", "alice"
        )

        assert profile.email == "alice@example.com"
        assert profile.username == "alice"
        assert profile.avatar_url is not None
        assert "seed=alice" in profile.avatar_url

    @pytest.mark.asyncio
    async def test_same_email_twice_returns_same_profile(self, unit_env):
        """One profile per email; the second call does not create another."""
        profile_service = await unit_env.get(ProfileService)

        first = await profile_service.get_or_create_profile(
            "alice@example.com", "alice"
        )
        second = await profile_service.get_or_create_profile(
            "alice@example.com", "someone-else"
        )

        assert second.id == first.id
        assert second.username == "alice"

    @pytest.mark.asyncio
    async def test_concurrent_create_returns_winner(self):
        """Losing the unique constraint race re-reads the existing profile."""
        db = InMemoryDatabase()
        winner = make_profile("alice")
        profile_service = ProfileService(
            profile_repository=RacingProfileRepository(db, winner),
            storage_settings=StorageSettings(),
        )

        profile = await profile_service.get_or_create_profile(winner.email, "alice")

        assert profile.id == winner.id
        assert len(db.profiles) == 1

    @pytest.mark.asyncio
    async def test_store_failure_raises_profile_creation_error(self):
        profile_service = ProfileService(
            profile_repository=BrokenProfileRepository(InMemoryDatabase()),
            storage_settings=StorageSettings(),
        )

        with pytest.raises(ProfileCreationError):
            await profile_service.get_or_create_profile("bob@example.com", "bob")

    @pytest.mark.asyncio
    async def test_overlong_username_is_rejected_before_any_write(self, unit_env):
        """A username past the column limit is a validation error, not a crash."""
        profile_service = await unit_env.get(ProfileService)
        db = await unit_env.get(InMemoryDatabase)

        with pytest.raises(ValidationError):
            await profile_service.get_or_create_profile("alice@example.com", "x" * 300)

        assert db.profiles == {}

    @pytest.mark.asyncio
    async def test_new_profile_timestamps_are_utc(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.get_or_create_profile(
            "alice@example.com", "alice"
        )

        assert profile.created_at.utcoffset() is not None
        assert profile.created_at.utcoffset().total_seconds() == 0


class TestProfileLookups:
    """Tests for profile reads and avatar updates."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises_not_found(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_by_id(ProfileId(uuid4()))

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        assert await profile_service.find_by_id(ProfileId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_update_avatar_changes_only_avatar(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await profile_repo.save(make_profile("alice"))

        updated = await profile_service.update_avatar(
            profile.id, "https://example.com/me.png"
        )

        assert updated.avatar_url == "https://example.com/me.png"
        assert updated.username == profile.username
        assert updated.email == profile.email

    @pytest.mark.asyncio
    async def test_update_avatar_missing_profile_raises_not_found(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.update_avatar(ProfileId(uuid4()), None)
