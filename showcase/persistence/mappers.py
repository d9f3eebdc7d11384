"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from showcase.domain.model import Comment, Profile, Vote, Work
from showcase.domain.value import (
    CommentId,
    FileType,
    ProfileId,
    VoteId,
    WorkCategory,
    WorkId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()


def row_to_work(row: Dict[str, Any]) -> Work:
    """Convert database row to Work domain model.

    The row may carry the author's joined username and avatar_url as
    author_username and author_avatar_url.

    Args:
        row: Database row as dict

    Returns:
        Work domain model
    """
    return Work(
        id=WorkId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        detailed_description=row.get("detailed_description"),
        author_id=ProfileId(_uuid(row["author_id"])),
        category=WorkCategory(row["category"]),
        file_url=row["file_url"],
        file_type=FileType(row["file_type"]),
        vote_count=row["vote_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        author_username=row.get("author_username"),
        author_avatar_url=row.get("author_avatar_url"),
    )


def work_to_dict(work: Work) -> Dict[str, Any]:
    """Convert Work domain model to database dict.

    Joined author fields are not columns of the works table and are excluded.
    """
    data = work.model_dump(exclude={"author_username", "author_avatar_url"})
    data["category"] = work.category.value
    data["file_type"] = work.file_type.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=ProfileId(_uuid(row["user_id"])),
        work_id=WorkId(_uuid(row["work_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        work_id=WorkId(_uuid(row["work_id"])),
        user_id=ProfileId(_uuid(row["user_id"])),
        content=row["content"],
        author=row["author"],
        avatar=row.get("avatar"),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
