"""Gallery view: pure filtering and ordering of works.

Nothing here touches storage. The functions take the full work list and
return a new list, so they can be composed and tested in isolation.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from showcase.domain.model import Work
from showcase.domain.value import ALL_CATEGORIES


@dataclass(frozen=True)
class GalleryView:
    """Filtered and sorted works ready for display."""

    works: list[Work]
    total: int
    empty_state: Optional[str] = None
    degraded: bool = False


def matches_query(work: Work, query: str) -> bool:
    """Case-insensitive substring match on title, description or author.

    An empty or whitespace-only query matches every work.
    """
    needle = query.strip().lower()
    if not needle:
        return True

    return (
        needle in work.title.lower()
        or needle in work.description.lower()
        or needle in (work.author_username or "").lower()
    )


def matches_category(work: Work, category: str) -> bool:
    """Exact category match; the "all" sentinel matches every work."""
    if not category or category == ALL_CATEGORIES:
        return True
    return work.category.value == category


def filter_works(works: Iterable[Work], query: str, category: str) -> list[Work]:
    """Keep works matching both the text query and the category."""
    return [
        w for w in works if matches_query(w, query) and matches_category(w, category)
    ]


def sort_works(works: Iterable[Work]) -> list[Work]:
    """Most votes first, newest first among equal votes.

    Python's sort is stable, so works equal on both keys keep their input
    order.
    """
    return sorted(works, key=lambda w: (w.vote_count, w.created_at), reverse=True)


def build_gallery(
    works: list[Work],
    query: str = "",
    category: str = ALL_CATEGORIES,
    empty_state_message: Optional[str] = None,
    degraded: bool = False,
) -> GalleryView:
    """Filter, sort and wrap works into a GalleryView.

    empty_state is set only when there are no works at all, not when a filter
    excludes everything.
    """
    visible = sort_works(filter_works(works, query, category))
    return GalleryView(
        works=visible,
        total=len(visible),
        empty_state=empty_state_message if not works else None,
        degraded=degraded,
    )
