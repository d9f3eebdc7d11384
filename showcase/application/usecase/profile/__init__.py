"""Profile use cases."""

from .get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ListProfileWorksRequest,
    ListProfileWorksResponse,
    ListProfileWorksUseCase,
)
from .update_avatar import UpdateAvatarRequest, UpdateAvatarUseCase

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ListProfileWorksRequest",
    "ListProfileWorksResponse",
    "ListProfileWorksUseCase",
    "UpdateAvatarRequest",
    "UpdateAvatarUseCase",
]
