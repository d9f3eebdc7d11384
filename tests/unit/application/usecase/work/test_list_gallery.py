"""Unit tests for ListGalleryUseCase."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from showcase.application.usecase.work import ListGalleryRequest, ListGalleryUseCase
from showcase.config import GallerySettings
from showcase.domain.error import ValidationError
from showcase.domain.repository import WorkRepository
from showcase.domain.service import VoteService, WorkService
from showcase.domain.value import ProfileId, WorkCategory
from showcase.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryVoteRepository,
    InMemoryWorkRepository,
)
from tests.conftest import make_work
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class UnreachableWorkRepository(InMemoryWorkRepository):
    """Work store that cannot be read."""

    async def find_all(self):
        raise OperationalError("SELECT works", {}, Exception("connection refused"))


class TestListGalleryUseCase:
    """Tests for ListGalleryUseCase."""

    @pytest.mark.asyncio
    async def test_empty_gallery_shows_empty_state(self, unit_env):
        list_gallery = await unit_env.get(ListGalleryUseCase)

        response = await list_gallery.execute(ListGalleryRequest())

        assert response.works == []
        assert response.total == 0
        assert response.empty_state == GallerySettings().empty_state_message
        assert response.degraded is False

    @pytest.mark.asyncio
    async def test_gallery_is_ranked_and_filtered(self, unit_env):
        list_gallery = await unit_env.get(ListGalleryUseCase)
        work_repo = await unit_env.get(WorkRepository)
        await work_repo.save(
            make_work(title="Arm", category=WorkCategory.ROBOTICS, vote_count=1)
        )
        await work_repo.save(
            make_work(title="Rover", category=WorkCategory.ROBOTICS, vote_count=5)
        )
        await work_repo.save(
            make_work(title="Canvas", category=WorkCategory.AI_ART, vote_count=9)
        )

        response = await list_gallery.execute(ListGalleryRequest(category="robotics"))

        assert [w.title for w in response.works] == ["Rover", "Arm"]
        assert response.total == 2
        assert response.empty_state is None
        assert all(w.has_voted is None for w in response.works)

    @pytest.mark.asyncio
    async def test_viewer_sees_own_votes(self, unit_env):
        list_gallery = await unit_env.get(ListGalleryUseCase)
        vote_service = await unit_env.get(VoteService)
        work_repo = await unit_env.get(WorkRepository)
        voted = await work_repo.save(make_work(title="Voted"))
        await work_repo.save(make_work(title="Skipped"))
        viewer_id = ProfileId(uuid4())
        await vote_service.cast_vote(voted.id, viewer_id)

        response = await list_gallery.execute(
            ListGalleryRequest(viewer_id=str(viewer_id))
        )

        flags = {w.title: w.has_voted for w in response.works}
        assert flags == {"Voted": True, "Skipped": False}

    @pytest.mark.asyncio
    async def test_unknown_category_is_rejected(self, unit_env):
        list_gallery = await unit_env.get(ListGalleryUseCase)

        with pytest.raises(ValidationError):
            await list_gallery.execute(ListGalleryRequest(category="astrology"))

    @pytest.mark.asyncio
    async def test_unreadable_store_degrades_to_empty_list(self):
        """A store failure yields an empty, degraded gallery instead of an error."""
        db = InMemoryDatabase()
        work_repo = UnreachableWorkRepository(db)
        list_gallery = ListGalleryUseCase(
            work_service=WorkService(work_repository=work_repo),
            vote_service=VoteService(
                vote_repository=InMemoryVoteRepository(db), work_repository=work_repo
            ),
            gallery_settings=GallerySettings(),
        )

        response = await list_gallery.execute(ListGalleryRequest(query="robot"))

        assert response.works == []
        assert response.degraded is True
        assert response.empty_state is None
