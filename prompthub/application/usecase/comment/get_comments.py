"""Get top-level comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.model import Comment
from prompthub.domain.service import CommentService, PostService, UserService
from prompthub.domain.value import AuthorSummary, PostId


class CommentItem(BaseModel):
    """Comment summary shown in a listing."""

    id: str
    content: str
    author: AuthorSummary
    like_count: int
    reply_count: int
    created_at: datetime
    updated_at: datetime


async def build_comment_items(
    comments: list[Comment], user_service: UserService
) -> list[CommentItem]:
    """Attach author summaries, loaded in one query, to comments."""
    authors = await user_service.get_summaries([c.author_id for c in comments])
    return [
        CommentItem(
            id=str(c.id),
            content=c.content,
            author=authors[c.author_id],
            like_count=c.like_count,
            reply_count=c.reply_count,
            created_at=c.created_at,
            updated_at=c.updated_at,
        )
        for c in comments
    ]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: UUID


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]


class GetCommentsUseCase:
    """Use case for listing a post's top-level comments, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service, for author summaries
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post is missing, hidden or deleted
        """
        post_id = PostId(request.post_id)
        await self.post_service.get_visible_post(post_id)

        comments = await self.comment_service.list_top_level(post_id)
        return GetCommentsResponse(
            comments=await build_comment_items(comments, self.user_service)
        )
