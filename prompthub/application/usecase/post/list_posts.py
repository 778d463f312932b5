"""List posts use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from prompthub.domain.model import Post
from prompthub.domain.repository import PostSortOrder
from prompthub.domain.service import LikeService, PostService, UserService
from prompthub.domain.value import (
    AuthorSummary,
    Pagination,
    PostSort,
    PostStatus,
    UserId,
)

SORT_ORDERS = {
    PostSort.LATEST: PostSortOrder.LATEST,
    PostSort.POPULAR: PostSortOrder.POPULAR,
    PostSort.MOST_FORKED: PostSortOrder.MOST_FORKED,
}


class PostItem(BaseModel):
    """Post as returned by listings and lookups."""

    id: str
    title: str
    description: str | None
    content: str
    tags: list[str]
    status: PostStatus
    author: AuthorSummary
    like_count: int
    comment_count: int
    fork_count: int
    created_at: datetime
    updated_at: datetime
    is_liked: bool = False


async def build_post_items(
    posts: list[Post],
    user_service: UserService,
    liked_ids: set | None = None,
) -> list[PostItem]:
    """Attach author summaries and the viewer's like state to posts."""
    authors = await user_service.get_summaries([p.author_id for p in posts])
    liked_ids = liked_ids or set()
    return [
        PostItem(
            id=str(p.id),
            title=p.title,
            description=p.description,
            content=p.content,
            tags=p.tags,
            status=p.status,
            author=authors[p.author_id],
            like_count=p.like_count,
            comment_count=p.comment_count,
            fork_count=p.fork_count,
            created_at=p.created_at,
            updated_at=p.updated_at,
            is_liked=p.id in liked_ids,
        )
        for p in posts
    ]


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    tag: str | None = None
    sort: PostSort = PostSort.LATEST
    search: str | None = None
    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    pagination: Pagination


class ListPostsUseCase:
    """Use case for the public post feed."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Only active, non-deleted posts are listed. Each item says whether
        the current user liked it.

        Args:
            request: List posts request with filters and pagination

        Returns:
            Page of posts and pagination info
        """
        with logfire.span(
            "list_posts.execute",
            sort=request.sort.value,
            tag=request.tag,
            page=request.page,
            limit=request.limit,
        ):
            posts, total = await self.post_service.list_posts(
                sort=SORT_ORDERS[request.sort],
                status=PostStatus.ACTIVE,
                tag=request.tag or None,
                search=request.search or None,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )

            viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
            liked_ids = await self.like_service.liked_post_ids(
                viewer_id, [p.id for p in posts]
            )

            return ListPostsResponse(
                posts=await build_post_items(posts, self.user_service, liked_ids),
                pagination=Pagination.build(request.page, request.limit, total),
            )
