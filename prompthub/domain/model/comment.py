"""Comment entity.

Comments nest to any depth. Each row keeps its direct parent and the id of
the top comment of its thread, so a thread can be fetched without walking
the tree.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from prompthub.domain.model.common import DomainModel, utcnow
from prompthub.domain.value import ACTIVE_SENTINEL, ROOT_ANCESTOR_ID
from prompthub.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post, or a reply to another comment.

    Threading:
    - parent_comment_id: direct parent (None for top-level)
    - ancestor_comment_id: top-level comment of the thread, "0" for top-level
    - reply_count: cached number of direct replies, only ever incremented
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=1000)
    parent_comment_id: Optional[CommentId] = None
    ancestor_comment_id: str = ROOT_ANCESTOR_ID
    like_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    deleted_at: datetime = ACTIVE_SENTINEL
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_active(self) -> bool:
        return self.deleted_at == ACTIVE_SENTINEL

    @property
    def is_top_level(self) -> bool:
        return self.parent_comment_id is None
