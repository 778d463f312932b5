"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from prompthub.domain.model.comment import Comment
from prompthub.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, whether or not it is deleted.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(self, post_id: PostId) -> List[Comment]:
        """Find the active top-level comments of a post, newest first.

        Args:
            post_id: The post ID

        Returns:
            Comments without a parent, ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find the active direct replies of a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            Child comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count active direct replies for several comments in one query.

        Args:
            parent_ids: Comments whose replies to count

        Returns:
            Mapping of parent ID to live reply count, parents without
            replies map to 0
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1.

        Uses SQL-level increment so concurrent replies are never lost.

        Args:
            comment_id: The parent comment ID
        """
        pass
