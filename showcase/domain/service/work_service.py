"""Work domain service."""

from typing import Any, Mapping
from uuid import uuid4

import logfire
import pydantic
from sqlalchemy.exc import IntegrityError

from showcase.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from showcase.domain.model import Work, utc_now
from showcase.domain.repository import WorkRepository
from showcase.domain.value import FileType, ProfileId, WorkCategory, WorkId

from .base import Service

# Fields an author may change after creation
EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "detailed_description",
        "category",
        "file_type",
        "file_url",
    }
)


def _required_text(value: Any, field: str) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(f"{field} is required")
    return text


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_enum(enum_type: type, value: Any, field: str):
    try:
        return enum_type(value)
    except ValueError:
        raise ValidationError(f"Invalid {field}: {value!r}")


def clean_work_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Validate and normalize the editable fields of a work.

    Text fields are trimmed, an empty detailed description becomes None,
    category and file_type are parsed into their enums.

    Raises:
        ValidationError: If a required field is empty or an enum value is unknown
    """
    return {
        "title": _required_text(fields.get("title"), "title"),
        "description": _required_text(fields.get("description"), "description"),
        "detailed_description": _optional_text(fields.get("detailed_description")),
        "category": _parse_enum(WorkCategory, fields.get("category"), "category"),
        "file_type": _parse_enum(FileType, fields.get("file_type"), "file_type"),
        "file_url": _required_text(fields.get("file_url"), "file_url"),
    }


class WorkService(Service):
    """Domain service for work operations.

    Enforces author-only mutation and validates every write before it
    reaches the repository.
    """

    def __init__(self, work_repository: WorkRepository) -> None:
        """Initialize work service.

        Args:
            work_repository: Work repository
        """
        self.work_repository = work_repository

    def _build(self, **data: Any) -> Work:
        try:
            return Work(**data)
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e

    async def create_work(
        self, author_id: ProfileId, fields: Mapping[str, Any]
    ) -> Work:
        """Create a work owned by author_id.

        Args:
            author_id: Profile ID of the author (from the session)
            fields: title, description, detailed_description, category,
                file_type and file_url

        Returns:
            The stored work joined with its author's public fields

        Raises:
            ValidationError: If the fields are invalid
            NotFoundError: If the author's profile no longer exists
        """
        with logfire.span("work_service.create_work", author_id=str(author_id)):
            cleaned = clean_work_fields(fields)
            now = utc_now()
            work = self._build(
                id=WorkId(uuid4()),
                author_id=author_id,
                vote_count=0,
                created_at=now,
                updated_at=now,
                **cleaned,
            )

            try:
                saved = await self.work_repository.save(work)
            except IntegrityError as e:
                logfire.warn("Work author no longer exists", author_id=str(author_id))
                raise NotFoundError("Profile", str(author_id)) from e

            logfire.info(
                "Work created",
                work_id=str(saved.id),
                category=saved.category.value,
                file_type=saved.file_type.value,
            )
            return saved

    async def get_work(self, work_id: WorkId) -> Work:
        """Get a work by ID.

        Raises:
            NotFoundError: If the work does not exist
        """
        with logfire.span("work_service.get_work", work_id=str(work_id)):
            work = await self.work_repository.find_by_id(work_id)
            if not work:
                logfire.warn("Work not found", work_id=str(work_id))
                raise NotFoundError("Work", str(work_id))
            return work

    async def list_works(self) -> list[Work]:
        """All works, newest first."""
        return await self.work_repository.find_all()

    async def list_works_by_author(self, author_id: ProfileId) -> list[Work]:
        """An author's works, newest first."""
        return await self.work_repository.find_by_author(author_id)

    def _check_author(self, work: Work, actor_id: ProfileId) -> None:
        if work.author_id != actor_id:
            logfire.warn(
                "Non-author attempted to modify work",
                work_id=str(work.id),
                actor_id=str(actor_id),
            )
            raise NotAuthorizedError("work", str(work.id), str(actor_id))

    async def update_work(
        self, work_id: WorkId, actor_id: ProfileId, changes: Mapping[str, Any]
    ) -> Work:
        """Apply a partial update to a work.

        The merged record is re-validated and updated_at always refreshed.

        Args:
            work_id: Work to update
            actor_id: Profile performing the update
            changes: Subset of the editable fields

        Returns:
            The updated work

        Raises:
            NotFoundError: If the work does not exist
            NotAuthorizedError: If actor_id is not the author
            ValidationError: If the merged record is invalid
        """
        with logfire.span(
            "work_service.update_work", work_id=str(work_id), actor_id=str(actor_id)
        ):
            work = await self.get_work(work_id)
            self._check_author(work, actor_id)

            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(f"Fields not editable: {sorted(unknown)}")

            merged = {field: getattr(work, field) for field in EDITABLE_FIELDS}
            merged.update(changes)
            cleaned = clean_work_fields(merged)

            updated = self._build(
                **{
                    **work.model_dump(),
                    **cleaned,
                    "updated_at": utc_now(),
                }
            )
            saved = await self.work_repository.save(updated)
            logfire.info(
                "Work updated", work_id=str(work_id), fields=sorted(changes.keys())
            )
            return saved

    async def delete_work(self, work_id: WorkId, actor_id: ProfileId) -> None:
        """Delete a work with its votes and comments.

        Raises:
            NotFoundError: If the work does not exist
            NotAuthorizedError: If actor_id is not the author
        """
        with logfire.span(
            "work_service.delete_work", work_id=str(work_id), actor_id=str(actor_id)
        ):
            work = await self.get_work(work_id)
            self._check_author(work, actor_id)

            deleted = await self.work_repository.delete_with_dependents(work_id)
            if not deleted:
                raise NotFoundError("Work", str(work_id))
            logfire.info("Work deleted", work_id=str(work_id))
