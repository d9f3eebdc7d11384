"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .gallery import GalleryView, build_gallery, filter_works, sort_works
from .jwt_service import JWTService
from .media import present_media
from .profile_service import ProfileService
from .storage_service import StorageClient, StorageService, StoredFile
from .vote_service import VoteService
from .work_service import WorkService

__all__ = [
    "CommentService",
    "GalleryView",
    "JWTService",
    "ProfileService",
    "Service",
    "StorageClient",
    "StorageService",
    "StoredFile",
    "VoteService",
    "WorkService",
    "build_gallery",
    "filter_works",
    "present_media",
    "sort_works",
]
