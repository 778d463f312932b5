"""Post aggregate root.

Posts share a prompt with the community: a title, a short description and
the prompt text itself, tagged for discovery.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from prompthub.domain.model.common import DomainModel, utcnow
from prompthub.domain.value import ACTIVE_SENTINEL, PostId, PostStatus, UserId


class Post(DomainModel):
    """Post aggregate root.

    Counters (likes, comments, forks) are denormalized onto the row and only
    change through atomic increments in the repository.
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.ACTIVE
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    fork_count: int = Field(default=0, ge=0)
    deleted_at: datetime = ACTIVE_SENTINEL
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at != ACTIVE_SENTINEL

    @property
    def is_visible(self) -> bool:
        """Whether the post is listed and open for comments and likes."""
        return self.status == PostStatus.ACTIVE and not self.is_deleted
