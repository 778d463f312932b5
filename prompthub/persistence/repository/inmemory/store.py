"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from prompthub.domain.model import Comment, Like, Post, Prompt, User
from prompthub.domain.value import CommentId, PostId, PromptId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    One store outlives many repository instances, the way a database
    outlives request sessions.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    likes: dict[tuple[PostId, UserId], Like] = field(default_factory=dict)
    prompts: dict[PromptId, Prompt] = field(default_factory=dict)


def newest_first(items: list, key) -> list:
    """Sort by key descending, later insertions first on ties."""
    ordered = sorted(enumerate(items), key=lambda p: (key(p[1]), p[0]), reverse=True)
    return [item for _, item in ordered]
