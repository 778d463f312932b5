"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from prompthub.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
)
from prompthub.domain.service import JWTService
from prompthub.interface.api.response import DataResponse
from prompthub.interface.api.session import SessionToken, require_user_id

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Length is checked after trimming by the use case.
    """

    content: str
    parent_comment_id: UUID | None = None  # Parent comment ID for replies


@router.get("/{post_id}/comments", response_model=DataResponse[list[CommentItem]])
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> DataResponse[list[CommentItem]]:
    """Get the top-level comments of a post, newest first.

    Replies are fetched lazily per comment, see ``get_replies``.
    """
    result = await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    return DataResponse(data=result.comments)


@router.get(
    "/{post_id}/comments/{comment_id}/replies",
    response_model=DataResponse[list[CommentItem]],
)
async def get_replies(
    post_id: UUID,
    comment_id: UUID,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> DataResponse[list[CommentItem]]:
    """Get the direct replies of a comment, oldest first."""
    result = await get_replies_use_case.execute(
        GetRepliesRequest(post_id=post_id, comment_id=comment_id)
    )
    return DataResponse(data=result.replies)


@router.post("/{post_id}/comments", response_model=DataResponse[CommentItem])
async def create_comment(
    auth_token: SessionToken,
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[CommentItem]:
    """Comment on a post, or reply to a comment when a parent is given.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content and optional parent comment
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created comment
    """
    user_id = require_user_id(jwt_service, auth_token)
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=post_id,
            content=request.content,
            author_id=user_id,
            parent_comment_id=request.parent_comment_id,
        )
    )
    return DataResponse(data=result.comment)
