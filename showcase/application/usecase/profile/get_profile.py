"""Get profile use case."""

from uuid import UUID

from pydantic import BaseModel

from showcase.application.usecase.common import ProfileInfo, WorkItem
from showcase.domain.service import ProfileService, VoteService, WorkService
from showcase.domain.value import ProfileId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    profile_id: str


class GetProfileUseCase:
    """Use case for reading a public profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileInfo:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_service.get_by_id(
            ProfileId(UUID(request.profile_id))
        )
        return ProfileInfo.from_profile(profile)


class ListProfileWorksRequest(BaseModel):
    """List an author's works."""

    profile_id: str
    viewer_id: str | None = None  # Current profile ID (if authenticated)


class ListProfileWorksResponse(BaseModel):
    """An author's works, newest first."""

    works: list[WorkItem]
    total: int


class ListProfileWorksUseCase:
    """Use case for listing the works of one author."""

    def __init__(
        self,
        profile_service: ProfileService,
        work_service: WorkService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list profile works use case.

        Args:
            profile_service: Profile domain service
            work_service: Work domain service
            vote_service: Vote domain service
        """
        self.profile_service = profile_service
        self.work_service = work_service
        self.vote_service = vote_service

    async def execute(
        self, request: ListProfileWorksRequest
    ) -> ListProfileWorksResponse:
        """Execute list profile works flow.

        Raises:
            NotFoundError: If the profile does not exist
        """
        author = await self.profile_service.get_by_id(
            ProfileId(UUID(request.profile_id))
        )
        works = await self.work_service.list_works_by_author(author.id)

        voted: dict = {}
        if request.viewer_id:
            voted = await self.vote_service.get_user_votes_for_works(
                ProfileId(UUID(request.viewer_id)), [w.id for w in works]
            )

        items = [
            WorkItem.from_work(w, voted.get(w.id) if request.viewer_id else None)
            for w in works
        ]
        return ListProfileWorksResponse(works=items, total=len(items))
