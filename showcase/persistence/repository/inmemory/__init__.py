"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .profile import InMemoryProfileRepository
from .store import InMemoryDatabase
from .vote import InMemoryVoteRepository
from .work import InMemoryWorkRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryCommentRepository",
    "InMemoryProfileRepository",
    "InMemoryVoteRepository",
    "InMemoryWorkRepository",
]
