"""Upload use cases."""

from .upload_file import (
    DeleteFileRequest,
    DeleteFileResponse,
    DeleteFileUseCase,
    UploadFileRequest,
    UploadFileResponse,
    UploadFileUseCase,
)

__all__ = [
    "DeleteFileRequest",
    "DeleteFileResponse",
    "DeleteFileUseCase",
    "UploadFileRequest",
    "UploadFileResponse",
    "UploadFileUseCase",
]
