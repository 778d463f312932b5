"""Like post use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import LikeService
from prompthub.domain.value import LikeAction, PostId, UserId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: UUID
    user_id: str
    action: LikeAction = LikeAction.INCREMENT


class LikePostResponse(BaseModel):
    """Like state after the toggle."""

    like_count: int
    is_liked: bool


class LikePostUseCase:
    """Use case for liking or unliking a post."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like toggle.

        Repeating a like or unliking a post that was never liked is a
        no-op that reports the current state.

        Raises:
            NotFoundError: If the post is missing, hidden or deleted
        """
        like_count, is_liked = await self.like_service.toggle_like(
            PostId(request.post_id), UserId(UUID(request.user_id)), request.action
        )
        return LikePostResponse(like_count=like_count, is_liked=is_liked)
