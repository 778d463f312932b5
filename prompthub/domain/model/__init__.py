"""Domain model entities for PromptHub."""

from prompthub.domain.model.comment import Comment
from prompthub.domain.model.like import Like
from prompthub.domain.model.post import Post
from prompthub.domain.model.prompt import Prompt
from prompthub.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
    "Prompt",
]
