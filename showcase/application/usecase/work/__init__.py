"""Work use cases."""

from .create_work import CreateWorkRequest, CreateWorkUseCase
from .delete_work import DeleteWorkRequest, DeleteWorkUseCase
from .get_media import GetMediaRequest, GetMediaUseCase
from .get_work import GetWorkRequest, GetWorkUseCase
from .list_gallery import ListGalleryRequest, ListGalleryResponse, ListGalleryUseCase
from .update_work import UpdateWorkRequest, UpdateWorkUseCase

__all__ = [
    "CreateWorkRequest",
    "CreateWorkUseCase",
    "DeleteWorkRequest",
    "DeleteWorkUseCase",
    "GetMediaRequest",
    "GetMediaUseCase",
    "GetWorkRequest",
    "GetWorkUseCase",
    "ListGalleryRequest",
    "ListGalleryResponse",
    "ListGalleryUseCase",
    "UpdateWorkRequest",
    "UpdateWorkUseCase",
]
