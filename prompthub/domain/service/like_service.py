"""Like domain service."""

from uuid import uuid4

import logfire

from prompthub.domain.model.like import Like
from prompthub.domain.repository import LikeRepository, PostRepository
from prompthub.domain.value import LikeAction, LikeId, PostId, UserId

from .base import Service
from .post_service import PostService


class LikeService(Service):
    """Domain service for liking posts.

    Liking twice or unliking a post that was never liked changes nothing
    and reports the current state.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository, for the like counter
            post_service: Post domain service
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.post_service = post_service

    async def toggle_like(
        self, post_id: PostId, user_id: UserId, action: LikeAction
    ) -> tuple[int, bool]:
        """Like or unlike a visible post.

        Args:
            post_id: Post ID
            user_id: Acting user
            action: Increment to like, decrement to unlike

        Returns:
            Like count after the change (never below 0) and whether the user
            now likes the post

        Raises:
            NotFoundError: If the post is missing, hidden or deleted
        """
        with logfire.span(
            "like_service.toggle_like",
            post_id=str(post_id),
            user_id=str(user_id),
            action=action.value,
        ):
            post = await self.post_service.get_visible_post(post_id)

            if action == LikeAction.INCREMENT:
                like = Like(id=LikeId(uuid4()), post_id=post_id, user_id=user_id)
                if not await self.like_repository.save(like):
                    logfire.info("Post already liked", post_id=str(post_id))
                    return max(post.like_count, 0), True
                like_count = await self.post_repository.increment_like_count(post_id)
                logfire.info("Post liked", post_id=str(post_id), like_count=like_count)
                return max(like_count, 0), True

            if not await self.like_repository.delete(post_id, user_id):
                logfire.info("Post was not liked", post_id=str(post_id))
                return max(post.like_count, 0), False
            like_count = await self.post_repository.decrement_like_count(post_id)
            logfire.info("Post unliked", post_id=str(post_id), like_count=like_count)
            return max(like_count, 0), False

    async def liked_post_ids(
        self, user_id: UserId | None, post_ids: list[PostId]
    ) -> set[PostId]:
        """Which of the posts the user likes, empty for anonymous viewers."""
        if user_id is None or not post_ids:
            return set()
        return await self.like_repository.find_liked_post_ids(user_id, post_ids)
