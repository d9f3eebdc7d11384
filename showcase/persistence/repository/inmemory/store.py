"""Shared state behind the in-memory repositories.

A single store is shared by every in-memory repository in a container, so
that joins (work author fields) and cascades (work deletion) behave like the
database.
"""

from dataclasses import dataclass, field

from showcase.domain.model import Comment, Profile, Vote, Work
from showcase.domain.value import CommentId, ProfileId, VoteId, WorkId


@dataclass
class InMemoryDatabase:
    """Tables of the in-memory store, keyed by primary key."""

    profiles: dict[ProfileId, Profile] = field(default_factory=dict)
    works: dict[WorkId, Work] = field(default_factory=dict)
    votes: dict[VoteId, Vote] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
