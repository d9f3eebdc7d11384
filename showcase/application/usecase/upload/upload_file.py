"""Upload file use cases."""

import logfire
from pydantic import BaseModel

from showcase.domain.service import StorageService
from showcase.domain.value import FileType


class UploadFileRequest(BaseModel):
    """Upload file request."""

    user_id: str  # From the session
    filename: str
    content: bytes
    content_type: str
    file_type: FileType


class UploadFileResponse(BaseModel):
    """Public URL and storage path of an uploaded file."""

    url: str
    path: str


class UploadFileUseCase:
    """Use case for uploading a work's media file."""

    def __init__(self, storage_service: StorageService) -> None:
        self.storage_service = storage_service

    async def execute(self, request: UploadFileRequest) -> UploadFileResponse:
        """Execute upload flow.

        Raises:
            UploadTooLargeError: If the file exceeds the size limit
            ValidationError: If the file does not match file_type
            StorageError: If the storage backend fails
        """
        with logfire.span(
            "upload_file.execute",
            user_id=request.user_id,
            file_type=request.file_type.value,
        ):
            stored = await self.storage_service.upload(
                filename=request.filename,
                content=request.content,
                content_type=request.content_type,
                file_type=request.file_type,
            )
            return UploadFileResponse(url=stored.url, path=stored.path)


class DeleteFileRequest(BaseModel):
    """Delete uploaded file request."""

    user_id: str  # From the session
    path: str


class DeleteFileResponse(BaseModel):
    """Whether the file was removed."""

    deleted: bool


class DeleteFileUseCase:
    """Use case for removing an uploaded file."""

    def __init__(self, storage_service: StorageService) -> None:
        self.storage_service = storage_service

    async def execute(self, request: DeleteFileRequest) -> DeleteFileResponse:
        """Execute delete flow.

        Raises:
            ValidationError: If path is not an upload path
        """
        deleted = await self.storage_service.delete(request.path)
        return DeleteFileResponse(deleted=deleted)
