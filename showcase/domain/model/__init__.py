"""Domain model entities for the showcase."""

from showcase.domain.model.comment import Comment
from showcase.domain.model.common import utc_now
from showcase.domain.model.media import MediaPresentation
from showcase.domain.model.profile import Profile
from showcase.domain.model.vote import Vote
from showcase.domain.model.work import Work

__all__ = [
    "Profile",
    "Work",
    "Vote",
    "Comment",
    "MediaPresentation",
    "utc_now",
]
