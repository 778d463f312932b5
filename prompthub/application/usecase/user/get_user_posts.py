"""Get user posts use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from prompthub.application.usecase.post.list_posts import PostItem, build_post_items
from prompthub.domain.repository import PostSortOrder
from prompthub.domain.service import LikeService, PostService, UserService
from prompthub.domain.value import Pagination, PostStatus, UserId


class GetUserPostsRequest(BaseModel):
    """Get user posts request."""

    user_id: str
    status: PostStatus | None = None
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class GetUserPostsResponse(BaseModel):
    """Get user posts response."""

    posts: list[PostItem]
    pagination: Pagination


class GetUserPostsUseCase:
    """Use case for listing the current user's own posts, hidden ones included."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        self.post_service = post_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: GetUserPostsRequest) -> GetUserPostsResponse:
        """List the user's non-deleted posts, most recently updated first."""
        user_id = UserId(UUID(request.user_id))
        posts, total = await self.post_service.list_posts(
            sort=PostSortOrder.RECENTLY_UPDATED,
            status=request.status,
            author_id=user_id,
            search=request.search or None,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        liked_ids = await self.like_service.liked_post_ids(
            user_id, [p.id for p in posts]
        )
        return GetUserPostsResponse(
            posts=await build_post_items(posts, self.user_service, liked_ids),
            pagination=Pagination.build(request.page, request.limit, total),
        )
