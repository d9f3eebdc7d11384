"""Mapping of domain and adapter errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from showcase.adapter.error import StorageError
from showcase.domain.error import (
    AlreadyVotedError,
    NotAuthorizedError,
    NotFoundError,
    ProfileCreationError,
    UploadTooLargeError,
    ValidationError,
    VoteInProgressError,
)

_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (ValidationError, 422),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyVotedError, status.HTTP_409_CONFLICT),
    (VoteInProgressError, status.HTTP_409_CONFLICT),
    (UploadTooLargeError, 413),
    (ProfileCreationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StorageError, status.HTTP_502_BAD_GATEWAY),
]


def _handler(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        if status_code >= 500:
            logfire.error(
                "Request failed",
                path=request.url.path,
                error=str(exc),
                error_type=type(exc).__name__,
            )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handle


def register_error_handlers(app: FastAPI) -> None:
    """Register one exception handler per mapped error type.

    Args:
        app: FastAPI application
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, _handler(status_code))
