"""Media presentation descriptor."""

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import FileType, MediaElement


class MediaPresentation(DomainModel):
    """How a client should render a work's attached media.

    Every mode carries a download/open affordance. When the embedded
    element fails to load, the client swaps to `fallback` (there is no
    retry).
    """

    mode: FileType
    element: MediaElement
    source_url: str
    title: str
    download_url: str
    download_filename: str = Field(min_length=1)
    fallback: MediaElement = MediaElement.LINK_CARD
    opens_externally: bool = False
