"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.

Tags are stored as one comma-delimited string and normalized to a list here.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from prompthub.domain.model import Comment, Like, Post, Prompt, User
from prompthub.domain.value import (
    CommentId,
    LikeId,
    PostId,
    PostStatus,
    PromptId,
    UserId,
    join_tags,
    normalize_tags,
)
from prompthub.domain.value.types import UserRole, UserStatus


def _uuid(value: Any) -> Optional[UUID]:
    """Accept UUIDs returned by the driver or as strings."""
    if value is None:
        return None
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        password_hash=row["password_hash"],
        name=row.get("name"),
        phone=row.get("phone"),
        avatar=row.get("avatar"),
        role=UserRole(row["role"]),
        status=UserStatus(row["status"]),
        deleted_at=row["deleted_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    data["status"] = user.status.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        description=row.get("description"),
        content=row["content"],
        tags=normalize_tags(row.get("tags")),
        status=PostStatus(row["status"]),
        like_count=max(row["like_count"], 0),
        comment_count=row["comment_count"],
        fork_count=row["fork_count"],
        deleted_at=row["deleted_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump()
    data["tags"] = join_tags(post.tags)
    data["status"] = post.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_comment_id=CommentId(parent_id) if parent_id else None,
        ancestor_comment_id=str(row["ancestor_comment_id"]),
        like_count=row["like_count"],
        reply_count=row["reply_count"],
        deleted_at=row["deleted_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    return Like(
        id=LikeId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    return like.model_dump()


def row_to_prompt(row: Dict[str, Any]) -> Prompt:
    """Convert database row to Prompt domain model."""
    return Prompt(
        id=PromptId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        description=row.get("description"),
        type=row["type"],
        deleted_at=row["deleted_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def prompt_to_dict(prompt: Prompt) -> Dict[str, Any]:
    return prompt.model_dump()
