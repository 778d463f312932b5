"""Like entity.

A like links one user to one post, at most once.
"""

from datetime import datetime

from pydantic import Field

from prompthub.domain.model.common import DomainModel, utcnow
from prompthub.domain.value import LikeId, PostId, UserId


class Like(DomainModel):
    """Like of a post by a user, unique per (post_id, user_id)."""

    id: LikeId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
