"""Domain services."""

from .avatar_service import AvatarService, AvatarUpload, ObjectStorage
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService
from .prompt_service import PromptService
from .user_service import UserService

__all__ = [
    "AvatarService",
    "AvatarUpload",
    "CommentService",
    "JWTService",
    "LikeService",
    "ObjectStorage",
    "PostService",
    "PromptService",
    "Service",
    "UserService",
]
