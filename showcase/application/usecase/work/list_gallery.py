"""List gallery use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from showcase.application.usecase.common import WorkItem
from showcase.config import GallerySettings
from showcase.domain.error import ValidationError
from showcase.domain.model import Work
from showcase.domain.service import VoteService, WorkService, build_gallery
from showcase.domain.value import ALL_CATEGORIES, ProfileId, WorkCategory


class ListGalleryRequest(BaseModel):
    """List gallery request."""

    query: str = ""
    category: str = ALL_CATEGORIES
    viewer_id: str | None = None  # Current profile ID (if authenticated)


class ListGalleryResponse(BaseModel):
    """Gallery response.

    empty_state carries a prompt when no work exists at all. degraded is set
    when the store could not be read and the list is empty for that reason.
    """

    works: list[WorkItem]
    total: int
    empty_state: str | None = None
    degraded: bool = False


class ListGalleryUseCase:
    """Use case for the public gallery: filter by text and category, rank by votes."""

    def __init__(
        self,
        work_service: WorkService,
        vote_service: VoteService,
        gallery_settings: GallerySettings,
    ) -> None:
        """Initialize list gallery use case.

        Args:
            work_service: Work domain service
            vote_service: Vote domain service
            gallery_settings: Gallery settings (empty state prompt)
        """
        self.work_service = work_service
        self.vote_service = vote_service
        self.gallery_settings = gallery_settings

    async def execute(self, request: ListGalleryRequest) -> ListGalleryResponse:
        """Execute list gallery flow.

        Raises:
            ValidationError: If category is neither "all" nor a known category
        """
        category = request.category.strip() or ALL_CATEGORIES
        if category != ALL_CATEGORIES and category not in {
            c.value for c in WorkCategory
        }:
            raise ValidationError(f"Unknown category: {category!r}")

        with logfire.span(
            "list_gallery.execute", query=request.query, category=category
        ):
            degraded = False
            works: list[Work] = []
            try:
                works = await self.work_service.list_works()
            except (SQLAlchemyError, OSError) as e:
                logfire.error("Gallery load failed, serving empty list", error=str(e))
                degraded = True

            view = build_gallery(
                works,
                query=request.query,
                category=category,
                empty_state_message=(
                    None if degraded else self.gallery_settings.empty_state_message
                ),
                degraded=degraded,
            )

            voted: dict = {}
            if request.viewer_id and view.works:
                voted = await self.vote_service.get_user_votes_for_works(
                    ProfileId(UUID(request.viewer_id)), [w.id for w in view.works]
                )

            return ListGalleryResponse(
                works=[
                    WorkItem.from_work(
                        w, voted.get(w.id, False) if request.viewer_id else None
                    )
                    for w in view.works
                ],
                total=view.total,
                empty_state=view.empty_state,
                degraded=view.degraded,
            )
