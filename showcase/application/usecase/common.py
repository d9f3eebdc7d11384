"""Response models shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from showcase.domain.model import Profile, Work
from showcase.domain.value import FileType, WorkCategory


class ProfileInfo(BaseModel):
    """Public display fields of a profile."""

    id: str
    username: str
    email: str
    avatar_url: str | None

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileInfo":
        return cls(
            id=str(profile.id),
            username=profile.username,
            email=profile.email,
            avatar_url=profile.avatar_url,
        )


class WorkItem(BaseModel):
    """Work joined with its author's public fields."""

    work_id: str
    title: str
    description: str
    detailed_description: str | None
    author_id: str
    author_username: str | None
    author_avatar_url: str | None
    category: WorkCategory
    category_label: str
    file_url: str
    file_type: FileType
    vote_count: int
    created_at: datetime
    updated_at: datetime
    has_voted: bool | None = None  # None when there is no session

    @classmethod
    def from_work(cls, work: Work, has_voted: bool | None = None) -> "WorkItem":
        return cls(
            work_id=str(work.id),
            title=work.title,
            description=work.description,
            detailed_description=work.detailed_description,
            author_id=str(work.author_id),
            author_username=work.author_username,
            author_avatar_url=work.author_avatar_url,
            category=work.category,
            category_label=work.category.label,
            file_url=work.file_url,
            file_type=work.file_type,
            vote_count=work.vote_count,
            created_at=work.created_at,
            updated_at=work.updated_at,
            has_voted=has_voted,
        )
