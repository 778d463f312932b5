"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from prompthub.domain.model import Post, User
from prompthub.domain.value import PostId, PostStatus, UserId

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(**overrides) -> User:
    """Build a user with sensible defaults."""
    values = {
        "id": UserId(uuid4()),
        "email": f"user-{uuid4().hex[:8]}@example.com",
        "password_hash": "not-a-real-hash",
        "name": "Test User",
    }
    values.update(overrides)
    return User(**values)


def make_post(author_id: UserId, **overrides) -> Post:
    """Build an active post with sensible defaults."""
    values = {
        "id": PostId(uuid4()),
        "author_id": author_id,
        "title": "Summarize a paper",
        "description": "Turns an abstract into three bullet points",
        "content": "Summarize the following abstract in three bullet points.",
        "tags": ["writing"],
        "status": PostStatus.ACTIVE,
    }
    values.update(overrides)
    return Post(**values)
