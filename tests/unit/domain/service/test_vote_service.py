"""Unit tests for VoteService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from showcase.domain.error import NotFoundError
from showcase.domain.repository import VoteRepository, WorkRepository
from showcase.domain.service import VoteService
from showcase.domain.value import ProfileId, VoteOutcome, WorkId
from showcase.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryVoteRepository,
    InMemoryWorkRepository,
)
from tests.conftest import make_work
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class FailingIncrementWorkRepository(InMemoryWorkRepository):
    """Work repository whose counter increment always fails."""

    async def increment_vote_count(self, work_id: WorkId) -> None:
        raise OperationalError("UPDATE works", {}, Exception("connection reset"))


class OrphanedVoteRepository(InMemoryVoteRepository):
    """Vote repository whose insert hits a foreign key violation.

    With drop_work set, the work is deleted first, as a concurrent delete would.
    """

    def __init__(self, db: InMemoryDatabase, drop_work: bool = False) -> None:
        super().__init__(db)
        self.drop_work = drop_work

    async def add_if_absent(self, vote) -> bool:
        if self.drop_work:
            self._db.works.pop(vote.work_id, None)
        raise IntegrityError("INSERT INTO votes", {}, Exception("foreign key"))


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_cast_vote_stores_vote_and_increments_count(self, unit_env):
        """First vote should store one row and add one to vote_count."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        work_repo = await unit_env.get(WorkRepository)

        work = await work_repo.save(make_work(vote_count=3))
        user_id = ProfileId(uuid4())

        # Act
        outcome, updated = await vote_service.cast_vote(work.id, user_id)

        # Assert
        assert outcome is VoteOutcome.CAST
        assert updated.vote_count == 4
        assert await vote_repo.find_work_ids_by_user(user_id) == [work.id]

    @pytest.mark.asyncio
    async def test_second_vote_is_rejected_without_changing_count(self, unit_env):
        """Voting twice should leave one vote row and a single increment."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        work_repo = await unit_env.get(WorkRepository)

        work = await work_repo.save(make_work())
        user_id = ProfileId(uuid4())

        # Act
        first, _ = await vote_service.cast_vote(work.id, user_id)
        second, after = await vote_service.cast_vote(work.id, user_id)

        # Assert
        assert first is VoteOutcome.CAST
        assert second is VoteOutcome.ALREADY_VOTED
        assert after.vote_count == 1
        assert await vote_repo.find_work_ids_by_user(user_id) == [work.id]

    @pytest.mark.asyncio
    async def test_votes_from_different_profiles_accumulate(self, unit_env):
        """Each profile contributes one vote."""
        vote_service = await unit_env.get(VoteService)
        work_repo = await unit_env.get(WorkRepository)

        work = await work_repo.save(make_work())
        for _ in range(3):
            await vote_service.cast_vote(work.id, ProfileId(uuid4()))

        stored = await work_repo.find_by_id(work.id)
        assert stored.vote_count == 3

    @pytest.mark.asyncio
    async def test_vote_on_missing_work_raises_not_found(self, unit_env):
        """Voting for a work that does not exist should fail before any write."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_id = ProfileId(uuid4())

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(WorkId(uuid4()), user_id)

        assert await vote_repo.find_work_ids_by_user(user_id) == []

    @pytest.mark.asyncio
    async def test_failed_increment_keeps_vote(self):
        """An increment failure after the insert is tolerated; the vote stands."""
        # Arrange
        db = InMemoryDatabase()
        vote_repo = InMemoryVoteRepository(db)
        work_repo = FailingIncrementWorkRepository(db)
        vote_service = VoteService(vote_repository=vote_repo, work_repository=work_repo)

        work = await work_repo.save(make_work())
        user_id = ProfileId(uuid4())

        # Act
        outcome, updated = await vote_service.cast_vote(work.id, user_id)

        # Assert - vote stored, counter left behind
        assert outcome is VoteOutcome.CAST
        assert updated.vote_count == 0
        assert await vote_repo.find_work_ids_by_user(user_id) == [work.id]

        # Reconciliation repairs the drift
        corrected = await vote_service.reconcile_vote_counts()
        assert corrected == [work.id]
        assert (await work_repo.find_by_id(work.id)).vote_count == 1

    @pytest.mark.asyncio
    async def test_work_deleted_during_vote_raises_not_found(self):
        """A work removed between the lookup and the insert is a missing work."""
        db = InMemoryDatabase()
        work_repo = InMemoryWorkRepository(db)
        vote_service = VoteService(
            vote_repository=OrphanedVoteRepository(db, drop_work=True),
            work_repository=work_repo,
        )
        work = await work_repo.save(make_work())

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.cast_vote(work.id, ProfileId(uuid4()))

        assert exc_info.value.resource == "Work"

    @pytest.mark.asyncio
    async def test_vote_from_removed_profile_raises_not_found(self):
        db = InMemoryDatabase()
        work_repo = InMemoryWorkRepository(db)
        vote_service = VoteService(
            vote_repository=OrphanedVoteRepository(db),
            work_repository=work_repo,
        )
        work = await work_repo.save(make_work())
        user_id = ProfileId(uuid4())

        with pytest.raises(NotFoundError) as exc_info:
            await vote_service.cast_vote(work.id, user_id)

        assert exc_info.value.resource == "Profile"
        assert exc_info.value.identifier == str(user_id)


class TestVoteQueries:
    """Tests for vote lookups."""

    @pytest.mark.asyncio
    async def test_get_user_votes_for_works(self, unit_env):
        """Should report which of the given works the profile voted for."""
        vote_service = await unit_env.get(VoteService)
        work_repo = await unit_env.get(WorkRepository)

        voted = await work_repo.save(make_work(title="Voted"))
        not_voted = await work_repo.save(make_work(title="Not voted"))
        user_id = ProfileId(uuid4())
        await vote_service.cast_vote(voted.id, user_id)

        result = await vote_service.get_user_votes_for_works(
            user_id, [voted.id, not_voted.id]
        )

        assert result == {voted.id: True, not_voted.id: False}

    @pytest.mark.asyncio
    async def test_get_user_votes_for_no_works_is_empty(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_user_votes_for_works(ProfileId(uuid4()), []) == {}

    @pytest.mark.asyncio
    async def test_get_voted_work_ids(self, unit_env):
        """Should list every work the profile voted for."""
        vote_service = await unit_env.get(VoteService)
        work_repo = await unit_env.get(WorkRepository)

        first = await work_repo.save(make_work(title="First"))
        second = await work_repo.save(make_work(title="Second"))
        user_id = ProfileId(uuid4())
        await vote_service.cast_vote(first.id, user_id)
        await vote_service.cast_vote(second.id, user_id)

        work_ids = await vote_service.get_voted_work_ids(user_id)

        assert set(work_ids) == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_reconcile_with_consistent_counts_changes_nothing(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        work_repo = await unit_env.get(WorkRepository)

        work = await work_repo.save(make_work())
        await vote_service.cast_vote(work.id, ProfileId(uuid4()))

        assert await vote_service.reconcile_vote_counts() == []
