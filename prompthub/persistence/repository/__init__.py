"""PostgreSQL repository implementations."""

from prompthub.persistence.repository.comment import PostgresCommentRepository
from prompthub.persistence.repository.like import PostgresLikeRepository
from prompthub.persistence.repository.post import PostgresPostRepository
from prompthub.persistence.repository.prompt import PostgresPromptRepository
from prompthub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresPromptRepository",
]
