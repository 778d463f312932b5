"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import CommentService, PostService, UserService
from prompthub.domain.value import CommentId, PostId, UserId

from .get_comments import CommentItem, build_comment_items


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: UUID
    content: str
    author_id: str  # User ID from authenticated user
    parent_comment_id: UUID | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the post is visible
        2. Create the comment (validates content and parent, bumps the
           parent's reply count)
        3. Bump the post's comment count

        All writes share the request's transaction.

        Args:
            request: Create comment request

        Returns:
            The created comment with its author summary

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the post or parent comment is not found
        """
        post_id = PostId(request.post_id)

        # Content is checked before the post so empty input never hits storage
        self.comment_service.validate_content(request.content)
        await self.post_service.get_visible_post(post_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_comment_id=(
                CommentId(request.parent_comment_id)
                if request.parent_comment_id
                else None
            ),
        )

        await self.post_service.increment_comment_count(post_id)

        [item] = await build_comment_items([comment], self.user_service)
        return CreateCommentResponse(comment=item)
