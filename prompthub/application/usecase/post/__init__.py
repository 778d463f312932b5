"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .like_post import LikePostRequest, LikePostResponse, LikePostUseCase
from .list_posts import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
)
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostItem",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
