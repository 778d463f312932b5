"""Domain value objects for PromptHub."""

from prompthub.domain.value.identifiers import (
    CommentId,
    LikeId,
    PostId,
    PromptId,
    UserId,
)
from prompthub.domain.value.types import (
    ACTIVE_SENTINEL,
    ROOT_ANCESTOR_ID,
    AuthorSummary,
    LikeAction,
    Pagination,
    PostSort,
    PostStatus,
    UserRole,
    UserStatus,
    join_tags,
    normalize_tags,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "PromptId",
    # Types
    "ACTIVE_SENTINEL",
    "ROOT_ANCESTOR_ID",
    "AuthorSummary",
    "LikeAction",
    "Pagination",
    "PostSort",
    "PostStatus",
    "UserRole",
    "UserStatus",
    "join_tags",
    "normalize_tags",
]
