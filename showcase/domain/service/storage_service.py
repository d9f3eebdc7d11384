"""Media storage domain service."""

import time
from dataclasses import dataclass
from posixpath import splitext
from uuid import uuid4

import logfire

from showcase.adapter.error import StorageError
from showcase.config import StorageSettings
from showcase.domain.error import UploadTooLargeError, ValidationError
from showcase.domain.value import FileType

from .base import Service

UPLOAD_PREFIX = "uploads"


class StorageClient:
    """Object storage client interface (one bucket)."""

    async def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Store content at path without overwriting.

        Raises:
            StorageError: If the object could not be stored
        """
        raise NotImplementedError

    async def delete(self, path: str) -> None:
        """Remove the object at path.

        Raises:
            StorageError: If the object could not be removed
        """
        raise NotImplementedError

    def public_url(self, path: str) -> str:
        """Public URL of the object at path."""
        raise NotImplementedError


@dataclass(frozen=True)
class StoredFile:
    """Result of an upload."""

    url: str
    path: str


def accepts(file_type: FileType, filename: str, content_type: str) -> bool:
    """Whether a file matches the accept pattern of a file type.

    Patterns follow the HTML accept attribute: "image/*" matches a MIME type
    prefix, ".pdf" matches a filename extension.
    """
    if not file_type.requires_upload:
        return False

    extension = splitext(filename)[1].lower()
    mime = (content_type or "").lower()
    for pattern in file_type.accept.split(","):
        pattern = pattern.strip().lower()
        if pattern.endswith("/*") and mime.startswith(pattern[:-1]):
            return True
        if pattern.startswith(".") and extension == pattern:
            return True
    return False


def generate_upload_path(filename: str) -> str:
    """uploads/<epoch-ms>-<random>.<ext>

    The extension is taken from the original filename; files without one get
    "bin".
    """
    extension = splitext(filename)[1].lstrip(".").lower() or "bin"
    stamp = int(time.time() * 1000)
    return f"{UPLOAD_PREFIX}/{stamp}-{uuid4().hex[:12]}.{extension}"


class StorageService(Service):
    """Domain service for media uploads."""

    def __init__(self, client: StorageClient, settings: StorageSettings) -> None:
        """Initialize storage service.

        Args:
            client: Object storage client
            settings: Storage settings
        """
        self.client = client
        self.settings = settings

    async def upload(
        self,
        filename: str,
        content: bytes,
        content_type: str,
        file_type: FileType,
    ) -> StoredFile:
        """Upload a file for a work of the given type.

        Args:
            filename: Original filename
            content: File bytes
            content_type: MIME type reported by the client
            file_type: Declared file type of the work

        Returns:
            Public URL and storage path

        Raises:
            UploadTooLargeError: If content exceeds the size limit
            ValidationError: If the file does not match file_type
            StorageError: If the storage backend rejects the upload
        """
        with logfire.span(
            "storage_service.upload", filename=filename, size=len(content)
        ):
            if len(content) > self.settings.max_upload_bytes:
                logfire.warn(
                    "Upload rejected: too large",
                    size=len(content),
                    limit=self.settings.max_upload_bytes,
                )
                raise UploadTooLargeError(len(content), self.settings.max_upload_bytes)

            if not accepts(file_type, filename, content_type):
                raise ValidationError(
                    f"{filename} ({content_type}) is not accepted for "
                    f"{file_type.value} works; expected {file_type.accept}"
                )

            path = generate_upload_path(filename)
            await self.client.upload(path, content, content_type)
            url = self.client.public_url(path)
            logfire.info("File uploaded", path=path)
            return StoredFile(url=url, path=path)

    async def delete(self, path: str) -> bool:
        """Delete an uploaded file.

        Failures are logged and reported as False.
        """
        with logfire.span("storage_service.delete", path=path):
            if not path.startswith(f"{UPLOAD_PREFIX}/") or ".." in path:
                raise ValidationError(f"Not an upload path: {path}")
            try:
                await self.client.delete(path)
            except StorageError as e:
                logfire.error("File delete failed", path=path, error=str(e))
                return False
            logfire.info("File deleted", path=path)
            return True
