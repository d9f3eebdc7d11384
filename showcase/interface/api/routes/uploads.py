"""Upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, Form, UploadFile, status

from showcase.application.usecase.upload import (
    DeleteFileRequest,
    DeleteFileResponse,
    DeleteFileUseCase,
    UploadFileRequest,
    UploadFileResponse,
    UploadFileUseCase,
)
from showcase.config import StorageSettings
from showcase.domain.error import UploadTooLargeError
from showcase.domain.service import JWTService
from showcase.domain.value import FileType
from showcase.interface.api.session import require_profile_id

router = APIRouter(prefix="/uploads", tags=["uploads"], route_class=DishkaRoute)


async def read_upload(file: UploadFile, limit: int) -> bytes:
    """Read an uploaded file, never buffering more than limit + 1 bytes.

    Raises:
        UploadTooLargeError: If the declared or actual size exceeds limit
    """
    if file.size is not None and file.size > limit:
        raise UploadTooLargeError(file.size, limit)

    content = await file.read(limit + 1)
    if len(content) > limit:
        raise UploadTooLargeError(len(content), limit)
    return content


@router.post(
    "", response_model=UploadFileResponse, status_code=status.HTTP_201_CREATED
)
async def upload_file(
    upload_file_use_case: FromDishka[UploadFileUseCase],
    jwt_service: FromDishka[JWTService],
    storage_settings: FromDishka[StorageSettings],
    file: UploadFile = File(...),
    file_type: FileType = Form(...),
    auth_token: str | None = Cookie(default=None),
) -> UploadFileResponse:
    """Upload a work's media file and get its public URL.

    The file must match the accept list of file_type (image/*, video/*,
    audio/*, or .pdf/.doc/.docx/.txt for documents).
    """
    user_id = require_profile_id(jwt_service, auth_token)
    content = await read_upload(file, storage_settings.max_upload_bytes)
    return await upload_file_use_case.execute(
        UploadFileRequest(
            user_id=user_id,
            filename=file.filename or "upload",
            content=content,
            content_type=file.content_type or "application/octet-stream",
            file_type=file_type,
        )
    )


@router.delete("/{path:path}", response_model=DeleteFileResponse)
async def delete_file(
    path: str,
    delete_file_use_case: FromDishka[DeleteFileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteFileResponse:
    """Delete an uploaded file by its storage path."""
    user_id = require_profile_id(jwt_service, auth_token)
    return await delete_file_use_case.execute(
        DeleteFileRequest(user_id=user_id, path=path)
    )
