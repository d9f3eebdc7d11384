"""Unit tests for profile use cases."""

from uuid import uuid4

import pytest

from showcase.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ListProfileWorksRequest,
    ListProfileWorksUseCase,
    UpdateAvatarRequest,
    UpdateAvatarUseCase,
)
from showcase.domain.error import NotFoundError
from showcase.domain.repository import ProfileRepository, WorkRepository
from tests.conftest import make_profile, make_work
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProfileUseCases:
    @pytest.mark.asyncio
    async def test_get_profile(self, unit_env):
        get_profile = await unit_env.get(GetProfileUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await profile_repo.save(make_profile("alice"))

        info = await get_profile.execute(GetProfileRequest(profile_id=str(profile.id)))

        assert info.username == "alice"

    @pytest.mark.asyncio
    async def test_get_missing_profile_raises_not_found(self, unit_env):
        get_profile = await unit_env.get(GetProfileUseCase)

        with pytest.raises(NotFoundError):
            await get_profile.execute(GetProfileRequest(profile_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_blank_avatar_clears_it(self, unit_env):
        update_avatar = await unit_env.get(UpdateAvatarUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        profile = await profile_repo.save(
            make_profile("alice", avatar_url="https://example.com/a.png")
        )

        info = await update_avatar.execute(
            UpdateAvatarRequest(profile_id=str(profile.id), avatar_url="  ")
        )

        assert info.avatar_url is None

    @pytest.mark.asyncio
    async def test_list_profile_works_newest_first(self, unit_env):
        list_works = await unit_env.get(ListProfileWorksUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        work_repo = await unit_env.get(WorkRepository)
        author = await profile_repo.save(make_profile("alice"))
        await work_repo.save(make_work(author_id=author.id, title="Old", age_minutes=60))
        await work_repo.save(make_work(author_id=author.id, title="New"))
        await work_repo.save(make_work(title="Someone else's"))

        response = await list_works.execute(
            ListProfileWorksRequest(profile_id=str(author.id))
        )

        assert [w.title for w in response.works] == ["New", "Old"]
        assert response.total == 2
