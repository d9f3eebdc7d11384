"""Reconcile vote counts use case."""

from pydantic import BaseModel

from showcase.domain.service import VoteService


class ReconcileVotesResponse(BaseModel):
    """Works whose vote_count was rewritten."""

    corrected_work_ids: list[str]


class ReconcileVotesUseCase:
    """Use case for repairing vote_count drift after failed increments."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self) -> ReconcileVotesResponse:
        """Execute reconciliation."""
        corrected = await self.vote_service.reconcile_vote_counts()
        return ReconcileVotesResponse(corrected_work_ids=[str(w) for w in corrected])
