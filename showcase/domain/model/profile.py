"""Profile aggregate root.

A profile is the public identity behind works, votes and comments. It is
created on first login for an email and never changes afterwards except for
its avatar.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel, utc_now
from showcase.domain.value import ProfileId


class Profile(DomainModel):
    """Profile aggregate root.

    Business rules:
    - One profile per email (enforced by database unique constraint)
    - Only avatar_url may change after creation
    """

    id: ProfileId
    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
