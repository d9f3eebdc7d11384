"""Strongly typed identifiers for showcase domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

ProfileId = NewType("ProfileId", UUID)
WorkId = NewType("WorkId", UUID)
VoteId = NewType("VoteId", UUID)
CommentId = NewType("CommentId", UUID)
