"""Per-process registry of vote operations in flight."""

from contextlib import contextmanager
from typing import Iterator

import logfire

from showcase.domain.error import VoteInProgressError
from showcase.domain.value import ProfileId, WorkId


class VoteInFlightRegistry:
    """Rejects a second concurrent vote for the same (profile, work) pair.

    This only blocks double submissions within one process while the first
    request is outstanding. Uniqueness across processes comes from the
    uq_votes_user_work constraint.
    """

    def __init__(self) -> None:
        self._pending: set[tuple[ProfileId, WorkId]] = set()

    def is_pending(self, user_id: ProfileId, work_id: WorkId) -> bool:
        return (user_id, work_id) in self._pending

    @contextmanager
    def claim(self, user_id: ProfileId, work_id: WorkId) -> Iterator[None]:
        """Hold the (user_id, work_id) slot for the duration of the block.

        Raises:
            VoteInProgressError: If the slot is already held
        """
        key = (user_id, work_id)
        if key in self._pending:
            logfire.warn(
                "Vote already in flight", user_id=str(user_id), work_id=str(work_id)
            )
            raise VoteInProgressError(str(work_id))

        self._pending.add(key)
        try:
            yield
        finally:
            self._pending.discard(key)
