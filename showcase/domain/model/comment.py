"""Comment entity.

Comments form an append-only log per work, read newest first.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel, utc_now
from showcase.domain.value import CommentId, ProfileId, WorkId


class Comment(DomainModel):
    """Comment entity.

    author and avatar are a snapshot of the commenter's display name and
    avatar taken at write time. They are never re-joined from the profile,
    so later profile changes do not rewrite historical comments.
    """

    id: CommentId
    work_id: WorkId
    user_id: ProfileId
    content: str = Field(min_length=1, max_length=10000)
    author: str = Field(min_length=1, max_length=255)
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
