"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Set

from prompthub.domain.model.like import Like
from prompthub.domain.value import PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity."""

    @abstractmethod
    async def find(self, post_id: PostId, user_id: UserId) -> Optional[Like]:
        """Find a user's like of a post.

        Returns:
            The like if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_liked_post_ids(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> Set[PostId]:
        """Which of the given posts the user has liked, in one query.

        Args:
            user_id: The user
            post_ids: Candidate posts

        Returns:
            Subset of post_ids liked by the user
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> bool:
        """Insert a like unless the user already liked the post.

        Args:
            like: The like to save

        Returns:
            True if a row was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like of a post.

        Returns:
            True if a like was removed
        """
        pass
