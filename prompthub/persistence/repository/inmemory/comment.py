"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from prompthub.domain.model.comment import Comment
from prompthub.domain.repository.comment import CommentRepository
from prompthub.domain.value import CommentId, PostId

from .store import InMemoryStore, newest_first


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(self, post_id: PostId) -> list[Comment]:
        """Find the active top-level comments of a post, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.is_top_level and c.is_active
        ]
        return newest_first(comments, key=lambda c: c.created_at)

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        """Find the active direct replies of a comment, oldest first."""
        replies = [
            c
            for c in self._comments.values()
            if c.parent_comment_id == parent_id and c.is_active
        ]
        # Stable sort keeps insertion order on equal timestamps
        return sorted(replies, key=lambda c: c.created_at)

    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count active direct replies per parent."""
        counts = {parent_id: 0 for parent_id in parent_ids}
        for c in self._comments.values():
            if c.parent_comment_id in counts and c.is_active:
                counts[c.parent_comment_id] += 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Increment reply_count by 1 (no await between read and write)."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"reply_count": comment.reply_count + 1}
            )
