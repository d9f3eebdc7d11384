"""Mock persistence providers for testing."""

from dishka import Scope, provide

from showcase.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VoteRepository,
    WorkRepository,
)
from showcase.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryProfileRepository,
    InMemoryVoteRepository,
    InMemoryWorkRepository,
)
from showcase.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so that every request served by one container
    (for example every call made through a TestClient) sees the same data.
    Each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory store."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, db: InMemoryDatabase) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_work_repository(self, db: InMemoryDatabase) -> WorkRepository:
        """Provide in-memory work repository."""
        return InMemoryWorkRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, db: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, db: InMemoryDatabase) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(db)
