"""Repository interfaces for the showcase domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from showcase.domain.repository.comment import CommentRepository
from showcase.domain.repository.profile import ProfileRepository
from showcase.domain.repository.vote import VoteRepository
from showcase.domain.repository.work import WorkRepository

__all__ = [
    "ProfileRepository",
    "WorkRepository",
    "VoteRepository",
    "CommentRepository",
]
