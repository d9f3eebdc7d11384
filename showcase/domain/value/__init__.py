"""Domain value objects for the showcase."""

from showcase.domain.value.identifiers import (
    CommentId,
    ProfileId,
    VoteId,
    WorkId,
)
from showcase.domain.value.types import (
    ALL_CATEGORIES,
    FileType,
    MediaElement,
    VoteOutcome,
    WorkCategory,
    email_local_part,
    normalize_email,
    placeholder_avatar_url,
)

__all__ = [
    # Identifiers
    "ProfileId",
    "WorkId",
    "VoteId",
    "CommentId",
    # Types
    "ALL_CATEGORIES",
    "FileType",
    "MediaElement",
    "VoteOutcome",
    "WorkCategory",
    # Helpers
    "email_local_part",
    "normalize_email",
    "placeholder_avatar_url",
]
