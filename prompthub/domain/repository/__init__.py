"""Repository interfaces for PromptHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from prompthub.domain.repository.comment import CommentRepository
from prompthub.domain.repository.like import LikeRepository
from prompthub.domain.repository.post import PostRepository, PostSortOrder
from prompthub.domain.repository.prompt import PromptRepository
from prompthub.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "PostSortOrder",
    "CommentRepository",
    "LikeRepository",
    "PromptRepository",
]
