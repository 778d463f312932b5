"""User use cases."""

from .avatar import (
    CreateAvatarUploadRequest,
    CreateAvatarUploadUseCase,
    UpdateAvatarRequest,
    UpdateAvatarResponse,
    UpdateAvatarUseCase,
)
from .get_user_posts import (
    GetUserPostsRequest,
    GetUserPostsResponse,
    GetUserPostsUseCase,
)

__all__ = [
    "CreateAvatarUploadRequest",
    "CreateAvatarUploadUseCase",
    "GetUserPostsRequest",
    "GetUserPostsResponse",
    "GetUserPostsUseCase",
    "UpdateAvatarRequest",
    "UpdateAvatarResponse",
    "UpdateAvatarUseCase",
]
