"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from prompthub.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostItem,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from prompthub.domain.service import JWTService
from prompthub.domain.value import LikeAction, PostSort, PostStatus
from prompthub.interface.api.response import (
    DataResponse,
    MessageResponse,
    PageResponse,
)
from prompthub.interface.api.session import SessionToken, require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1)
    description: str | None = None
    tags: list[str] = []


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post, omitted fields are left alone."""

    title: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    content: str | None = Field(default=None, min_length=1)
    tags: list[str] | None = None
    status: PostStatus | None = None


class LikePostAPIRequest(BaseModel):
    """API request for liking a post.

    A missing or unknown action counts as ``increment``.
    """

    action: str | None = None


class LikePostAPIResponse(BaseModel):
    """Like result with the action that was applied."""

    data: LikePostResponse
    action: LikeAction


@router.get("", response_model=PageResponse[PostItem])
async def list_posts(
    auth_token: SessionToken,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    tag: str | None = None,
    sort: PostSort = PostSort.LATEST,
    search: str | None = None,
) -> PageResponse[PostItem]:
    """List active posts.

    Args:
        page: Page number, starting at 1
        limit: Page size
        tag: Only posts carrying this tag
        sort: ``latest``, ``popular`` or ``most-forked``
        search: Substring of title, description or content
        auth_token: JWT token from cookie (optional, fills ``is_liked``)

    Returns:
        Posts with pagination
    """
    request = ListPostsRequest(
        page=page,
        limit=limit,
        tag=tag,
        sort=sort,
        search=search,
        user_id=jwt_service.get_user_id_from_token(auth_token),
    )
    result = await list_posts_use_case.execute(request)
    return PageResponse(data=result.posts, pagination=result.pagination)


@router.post("", response_model=DataResponse[PostItem])
async def create_post(
    auth_token: SessionToken,
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[PostItem]:
    """Publish a prompt as a post. Requires authentication."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title,
            content=request.content,
            description=request.description,
            tags=request.tags,
            author_id=user_id,
        )
    )
    return DataResponse(data=result.post)


@router.get("/{post_id}", response_model=DataResponse[PostItem])
async def get_post(
    auth_token: SessionToken,
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[PostItem]:
    """Get a post. Hidden posts are only shown to their author."""
    result = await get_post_use_case.execute(
        GetPostRequest(
            post_id=post_id, user_id=jwt_service.get_user_id_from_token(auth_token)
        )
    )
    return DataResponse(data=result.post)


@router.patch("/{post_id}", response_model=DataResponse[PostItem])
async def update_post(
    auth_token: SessionToken,
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[PostItem]:
    """Edit a post. Only the author can edit."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=user_id,
            **request.model_dump(exclude_unset=True),
        )
    )
    return DataResponse(data=result.post)


@router.delete("/{post_id}", response_model=DataResponse[MessageResponse])
async def delete_post(
    auth_token: SessionToken,
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[MessageResponse]:
    """Soft delete a post. Only the author can delete."""
    user_id = require_user_id(jwt_service, auth_token)
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=user_id)
    )
    return DataResponse(data=MessageResponse(message="Post deleted"))


@router.post("/{post_id}/like", response_model=LikePostAPIResponse)
async def like_post(
    auth_token: SessionToken,
    post_id: UUID,
    like_post_use_case: FromDishka[LikePostUseCase],
    jwt_service: FromDishka[JWTService],
    request: LikePostAPIRequest | None = None,
) -> LikePostAPIResponse:
    """Like or unlike a post. Requires authentication.

    Repeating an action is a no-op that reports the current state.
    """
    user_id = require_user_id(jwt_service, auth_token)
    action = LikeAction.parse(request.action if request else None)
    result = await like_post_use_case.execute(
        LikePostRequest(post_id=post_id, user_id=user_id, action=action)
    )
    return LikePostAPIResponse(data=result, action=action)
