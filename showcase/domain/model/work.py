"""Work aggregate root.

Works are the submissions shown in the gallery: a media file or a web link
with a title, a description and a category.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel, utc_now
from showcase.domain.value import FileType, ProfileId, WorkCategory, WorkId


class Work(DomainModel):
    """Work aggregate root.

    Owned exclusively by its author: only the author may update or delete it.
    vote_count is a denormalized cache of the number of votes and is only
    ever incremented by the vote ledger or rewritten by reconciliation.

    author_username and author_avatar_url are joined from the author's
    profile on read; they are not stored on the work row.
    """

    id: WorkId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)
    detailed_description: Optional[str] = Field(default=None, max_length=50000)
    author_id: ProfileId
    category: WorkCategory
    file_url: str = Field(min_length=1)
    file_type: FileType
    vote_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    author_username: Optional[str] = None
    author_avatar_url: Optional[str] = None
