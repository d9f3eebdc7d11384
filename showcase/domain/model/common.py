"""Shared base for profiles, works, votes and comments."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic entity.

    Updates go through ``model_copy(update=...)`` so a work or profile read
    from a repository is never mutated in place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Timezone-aware current time; every stored timestamp is UTC."""
    return datetime.now(timezone.utc)
