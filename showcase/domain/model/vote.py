"""Vote entity.

Each profile can cast one vote per work. Votes are never updated and only
disappear when their work is deleted.
"""

from datetime import datetime

from pydantic import Field

from showcase.domain.model.common import DomainModel, utc_now
from showcase.domain.value import ProfileId, VoteId, WorkId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (user_id, work_id) pair (enforced by database unique constraint)
    - Deleting the work deletes the vote
    """

    id: VoteId
    user_id: ProfileId
    work_id: WorkId
    created_at: datetime = Field(default_factory=utc_now)
