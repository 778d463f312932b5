"""Domain value objects for PromptHub.

Value objects are immutable and defined by their values, not identity.
"""

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from prompthub.domain.value.common import ValueObject
from prompthub.domain.value.identifiers import UserId

# Soft delete marker: active rows carry this value in deleted_at, deleting
# writes the real time. Keeps (email, deleted_at) style unique keys usable.
ACTIVE_SENTINEL = datetime(9999, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)

# ancestor_comment_id of top-level comments
ROOT_ANCESTOR_ID = "0"


class PostStatus(str, Enum):
    """Visibility of a post."""

    ACTIVE = "active"
    HIDDEN = "hidden"


class PostSort(str, Enum):
    """Orderings offered by the post listing."""

    LATEST = "latest"
    POPULAR = "popular"
    MOST_FORKED = "most-forked"


class LikeAction(str, Enum):
    """Direction of a like toggle."""

    INCREMENT = "increment"
    DECREMENT = "decrement"

    @classmethod
    def parse(cls, value: str | None) -> "LikeAction":
        """Parse an action, anything missing or unknown means increment."""
        if value == cls.DECREMENT.value:
            return cls.DECREMENT
        return cls.INCREMENT


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class AuthorSummary(ValueObject):
    """Public view of a user attached to posts and comments."""

    id: UserId
    name: str | None = None
    avatar: str | None = None


class Pagination(ValueObject):
    """Page window over a counted result set."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
            has_next=page * limit < total,
            has_prev=page > 1,
        )


def normalize_tags(value: str | Iterable[str] | None) -> list[str]:
    """Normalize stored or submitted tags to an ordered list.

    Accepts the comma-delimited column value or a list. Blank entries are
    dropped and surrounding whitespace stripped, order is preserved.

    Examples:
        >>> normalize_tags("gpt, writing,,")
        ['gpt', 'writing']
        >>> normalize_tags(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = list(value)
    return [tag.strip() for tag in parts if tag and tag.strip()]


def join_tags(tags: Iterable[str]) -> str:
    """Serialize tags to the comma-delimited column format."""
    return ",".join(normalize_tags(tags))
