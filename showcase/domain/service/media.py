"""Media presentation: how a work's attached file should be rendered."""

from posixpath import basename
from urllib.parse import unquote, urlparse

from showcase.domain.model import MediaPresentation
from showcase.domain.value import FileType, MediaElement

_ELEMENTS = {
    FileType.IMAGE: MediaElement.IMG,
    FileType.VIDEO: MediaElement.VIDEO,
    FileType.AUDIO: MediaElement.AUDIO,
    FileType.WEB: MediaElement.WEB_FRAME,
}


def is_pdf(file_url: str, title: str) -> bool:
    """Whether a document should be embedded as a PDF viewer.

    True when the URL path names a .pdf file or the title mentions PDF; a
    "pdf" elsewhere in the URL, such as a directory name, does not count.
    """
    path = unquote(urlparse(file_url).path).lower()
    return path.endswith(".pdf") or "pdf" in title.lower()


def download_filename(file_url: str, title: str) -> str:
    """Filename suggested for downloads.

    Last segment of the URL path, falling back to the title, then to
    "document".
    """
    name = unquote(basename(urlparse(file_url).path))
    return name or title.strip() or "document"


def present_media(file_url: str, file_type: FileType, title: str) -> MediaPresentation:
    """Map a work's file to a presentation descriptor.

    Every mode carries a download/open link, which is also what the client
    falls back to when the embedded element fails to load.

    Args:
        file_url: Public URL of the file, or the external URL for web works
        file_type: Declared file type of the work
        title: Work title

    Returns:
        Presentation descriptor
    """
    if file_type is FileType.DOCUMENT:
        element = (
            MediaElement.PDF_FRAME if is_pdf(file_url, title) else MediaElement.LINK_CARD
        )
    else:
        element = _ELEMENTS[file_type]

    return MediaPresentation(
        mode=file_type,
        element=element,
        source_url=file_url,
        title=title,
        download_url=file_url,
        download_filename=download_filename(file_url, title),
        fallback=MediaElement.LINK_CARD,
        opens_externally=file_type is FileType.WEB,
    )
