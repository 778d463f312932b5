"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import LikeService, PostService, UserService
from prompthub.domain.value import PostId, UserId

from .list_posts import PostItem, build_post_items


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: UUID
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase:
    """Use case for retrieving a single post."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        self.post_service = post_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Post ID and optional viewer

        Returns:
            Post details with the viewer's like state

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the post is hidden and the viewer is not its author
        """
        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
        post = await self.post_service.get_post_for_viewer(
            PostId(request.post_id), viewer_id
        )

        liked_ids = await self.like_service.liked_post_ids(viewer_id, [post.id])
        [item] = await build_post_items([post], self.user_service, liked_ids)
        return GetPostResponse(post=item)
