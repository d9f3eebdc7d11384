"""Vote domain service."""

from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from showcase.domain.error import NotFoundError
from showcase.domain.model import Vote, Work, utc_now
from showcase.domain.repository import VoteRepository, WorkRepository
from showcase.domain.value import ProfileId, VoteId, VoteOutcome, WorkId

from .base import Service


class VoteService(Service):
    """Domain service for the vote ledger.

    Stores at most one vote per (profile, work) and keeps the work's
    vote_count as a best-effort cache of the vote rows.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        work_repository: WorkRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            work_repository: Work repository
        """
        self.vote_repository = vote_repository
        self.work_repository = work_repository

    async def cast_vote(
        self, work_id: WorkId, user_id: ProfileId
    ) -> tuple[VoteOutcome, Work]:
        """Cast a vote for a work.

        The insert is a single insert-or-ignore on the (user, work) pair. When
        it stores a row the counter is incremented once; an increment failure
        is logged and the vote stands.

        Args:
            work_id: Work ID
            user_id: Voter's profile ID

        Returns:
            Outcome and the work as read after the vote

        Raises:
            NotFoundError: If the work or the voter does not exist
        """
        with logfire.span(
            "vote_service.cast_vote", work_id=str(work_id), user_id=str(user_id)
        ):
            work = await self.work_repository.find_by_id(work_id)
            if not work:
                logfire.warn("Vote on non-existent work", work_id=str(work_id))
                raise NotFoundError("Work", str(work_id))

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                work_id=work_id,
                created_at=utc_now(),
            )

            try:
                inserted = await self.vote_repository.add_if_absent(vote)
            except IntegrityError as e:
                # Work deleted or voter profile removed since the read above
                logfire.warn("Vote insert lost its target", error=str(e))
                if not await self.work_repository.find_by_id(work_id):
                    raise NotFoundError("Work", str(work_id)) from e
                raise NotFoundError("Profile", str(user_id)) from e

            if not inserted:
                logfire.warn(
                    "Duplicate vote attempt", user_id=str(user_id), work_id=str(work_id)
                )
                return VoteOutcome.ALREADY_VOTED, work

            try:
                await self.work_repository.increment_vote_count(work_id)
            except SQLAlchemyError as e:
                logfire.warn(
                    "Vote stored but counter increment failed",
                    work_id=str(work_id),
                    error=str(e),
                )

            refreshed = await self.work_repository.find_by_id(work_id)
            logfire.info(
                "Vote cast",
                work_id=str(work_id),
                user_id=str(user_id),
                vote_count=refreshed.vote_count if refreshed else None,
            )
            return VoteOutcome.CAST, refreshed or work

    async def get_voted_work_ids(self, user_id: ProfileId) -> list[WorkId]:
        """IDs of every work the profile voted for."""
        return await self.vote_repository.find_work_ids_by_user(user_id)

    async def get_user_votes_for_works(
        self, user_id: ProfileId, work_ids: list[WorkId]
    ) -> dict[WorkId, bool]:
        """Check which works a profile has voted on.

        Args:
            user_id: Profile ID
            work_ids: Work IDs to check

        Returns:
            Mapping of work ID to whether the profile voted for it
        """
        if not work_ids:
            return {}

        voted = await self.vote_repository.find_voted_work_ids(user_id, work_ids)
        return {wid: wid in voted for wid in work_ids}

    async def reconcile_vote_counts(self) -> list[WorkId]:
        """Recompute every vote_count from the vote rows.

        Returns:
            IDs of the works whose counter was corrected
        """
        with logfire.span("vote_service.reconcile_vote_counts"):
            corrected = await self.work_repository.reconcile_vote_counts()
            if corrected:
                logfire.warn(
                    "Vote counters corrected",
                    count=len(corrected),
                    work_ids=[str(w) for w in corrected],
                )
            else:
                logfire.info("Vote counters consistent")
            return corrected
