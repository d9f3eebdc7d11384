"""PostgreSQL repository implementations."""

from showcase.persistence.repository.comment import PostgresCommentRepository
from showcase.persistence.repository.profile import PostgresProfileRepository
from showcase.persistence.repository.vote import PostgresVoteRepository
from showcase.persistence.repository.work import PostgresWorkRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresWorkRepository",
    "PostgresVoteRepository",
    "PostgresCommentRepository",
]
