"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import CommentService, UserService
from prompthub.domain.value import CommentId, PostId

from .get_comments import CommentItem, build_comment_items


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    post_id: UUID
    comment_id: UUID


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    replies: list[CommentItem]


class GetRepliesUseCase:
    """Use case for expanding one level of a comment thread, oldest first."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Raises:
            NotFoundError: If the parent comment is missing or deleted
        """
        replies = await self.comment_service.list_replies(
            PostId(request.post_id), CommentId(request.comment_id)
        )
        return GetRepliesResponse(
            replies=await build_comment_items(replies, self.user_service)
        )
