"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import List, Optional

from prompthub.domain.model.post import Post
from prompthub.domain.value import PostId, PostStatus, UserId


class PostSortOrder(str, Enum):
    """Sort order for post listings."""

    LATEST = "latest"  # created_at DESC
    POPULAR = "popular"  # like_count DESC
    MOST_FORKED = "most-forked"  # fork_count DESC
    RECENTLY_UPDATED = "recently-updated"  # updated_at DESC


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including hidden and deleted posts.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.LATEST,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find non-deleted posts with filtering and pagination.

        Args:
            sort: Sort order
            status: Only posts with this status (None for any)
            author_id: Only posts by this author (None for all authors)
            tag: Only posts carrying this tag
            search: Substring matched against title, description and content
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count non-deleted posts matching the given filters.

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Counters are never overwritten by an update, they only move
        through the increment methods.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> None:
        """Mark a post deleted.

        Args:
            post_id: The post ID
            deleted_at: Deletion time written over the active sentinel
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment_count by 1.

        Args:
            post_id: The post ID
        """
        pass

    @abstractmethod
    async def increment_like_count(self, post_id: PostId) -> int:
        """Atomically increment like_count by 1.

        Args:
            post_id: The post ID

        Returns:
            The like count after the update
        """
        pass

    @abstractmethod
    async def decrement_like_count(self, post_id: PostId) -> int:
        """Atomically decrement like_count by 1, never below 0.

        Args:
            post_id: The post ID

        Returns:
            The like count after the update
        """
        pass
