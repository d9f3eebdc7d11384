"""Unit tests for CommentService."""

from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from showcase.domain.error import NotFoundError, ValidationError
from showcase.domain.repository import CommentRepository, ProfileRepository, WorkRepository
from showcase.domain.service import CommentService, ProfileService
from showcase.domain.value import WorkId
from showcase.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryWorkRepository,
)
from tests.conftest import make_profile, make_work
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class OrphanedCommentRepository(InMemoryCommentRepository):
    """Comment repository whose insert hits a foreign key violation.

    With drop_work set, the work is deleted first, as a concurrent delete would.
    """

    def __init__(self, db: InMemoryDatabase, drop_work: bool = False) -> None:
        super().__init__(db)
        self.drop_work = drop_work

    async def save(self, comment):
        if self.drop_work:
            self._db.works.pop(comment.work_id, None)
        raise IntegrityError("INSERT INTO comments", {}, Exception("foreign key"))


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_add_comment_snapshots_author(self, unit_env):
        """The comment records the author's name and avatar at write time."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        work_repo = await unit_env.get(WorkRepository)

        author = await profile_repo.save(
            make_profile("bob", avatar_url="https://example.com/bob.png")
        )
        work = await work_repo.save(make_work())

        # Act
        comment = await comment_service.add_comment(work.id, author, "  Lovely  ")

        # Assert
        assert comment.content == "Lovely"
        assert comment.author == "bob"
        assert comment.avatar == "https://example.com/bob.png"
        assert comment.user_id == author.id

    @pytest.mark.asyncio
    async def test_snapshot_is_not_rewritten_by_avatar_change(self, unit_env):
        """Changing the avatar later leaves historical comments untouched."""
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        work_repo = await unit_env.get(WorkRepository)

        author = await profile_repo.save(
            make_profile("bob", avatar_url="https://example.com/old.png")
        )
        work = await work_repo.save(make_work())
        await comment_service.add_comment(work.id, author, "First!")

        await profile_repo.update_avatar(author.id, "https://example.com/new.png")

        [comment] = await comment_service.list_comments(work.id)
        assert comment.avatar == "https://example.com/old.png"

    @pytest.mark.asyncio
    async def test_missing_avatar_falls_back_to_placeholder(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        work_repo = await unit_env.get(WorkRepository)
        work = await work_repo.save(make_work())

        comment = await comment_service.add_comment(
            work.id, make_profile("carol"), "Nice"
        )

        assert comment.avatar is not None
        assert "seed=carol" in comment.avatar

    @pytest.mark.asyncio
    async def test_blank_username_falls_back_to_email_local_part(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        profile = make_profile("dave", email="dave.smith@example.com")
        profile = profile.model_copy(update={"username": "   "})

        name, _ = comment_service.author_snapshot(profile)

        assert name == "dave.smith"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_is_rejected_before_write(self, unit_env, content):
        """Whitespace-only comments are never stored."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        work_repo = await unit_env.get(WorkRepository)
        work = await work_repo.save(make_work())

        with pytest.raises(ValidationError):
            await comment_service.add_comment(work.id, make_profile(), content)

        assert await comment_repo.find_by_work(work.id) == []

    @pytest.mark.asyncio
    async def test_comment_on_missing_work_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.add_comment(WorkId(uuid4()), make_profile(), "Hi")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("drop_work", "resource"), [(True, "Work"), (False, "Profile")]
    )
    async def test_foreign_key_failure_raises_not_found(
        self, unit_env, drop_work, resource
    ):
        """A work or author removed before the insert surfaces as not found."""
        db = InMemoryDatabase()
        work_repo = InMemoryWorkRepository(db)
        comment_service = CommentService(
            comment_repository=OrphanedCommentRepository(db, drop_work=drop_work),
            work_repository=work_repo,
            profile_service=await unit_env.get(ProfileService),
        )
        work = await work_repo.save(make_work())

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.add_comment(work.id, make_profile(), "Hi")

        assert exc_info.value.resource == resource


class TestListComments:
    """Tests for list_comments."""

    @pytest.mark.asyncio
    async def test_comments_are_newest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        work_repo = await unit_env.get(WorkRepository)
        work = await work_repo.save(make_work())
        author = make_profile("erin")

        older = await comment_service.add_comment(work.id, author, "older")
        # Push the first comment into the past to make the order unambiguous
        await comment_repo.save(
            older.model_copy(update={"created_at": older.created_at - timedelta(hours=1)})
        )
        await comment_service.add_comment(work.id, author, "newer")

        comments = await comment_service.list_comments(work.id)

        assert [c.content for c in comments] == ["newer", "older"]
