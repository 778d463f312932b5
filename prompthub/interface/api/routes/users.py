"""Current user routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from prompthub.application.usecase.post import PostItem
from prompthub.application.usecase.prompt import (
    ListPromptsRequest,
    ListPromptsUseCase,
    PromptItem,
)
from prompthub.application.usecase.user import (
    CreateAvatarUploadRequest,
    CreateAvatarUploadUseCase,
    GetUserPostsRequest,
    GetUserPostsUseCase,
    UpdateAvatarRequest,
    UpdateAvatarResponse,
    UpdateAvatarUseCase,
)
from prompthub.domain.service import AvatarUpload, JWTService
from prompthub.domain.value import PostStatus
from prompthub.interface.api.response import DataResponse, PageResponse
from prompthub.interface.api.session import SessionToken, require_user_id

router = APIRouter(prefix="/user", tags=["users"], route_class=DishkaRoute)


class AvatarPresignAPIRequest(BaseModel):
    """Describes the image the client is about to upload."""

    filename: str = Field(default="avatar.png", min_length=1)
    mime_type: str = "image/png"
    size: int = Field(default=0, ge=0)


class UpdateAvatarAPIRequest(BaseModel):
    """Points the avatar at an uploaded image."""

    avatar_url: str = Field(min_length=1)


@router.get("/posts", response_model=PageResponse[PostItem])
async def get_user_posts(
    auth_token: SessionToken,
    get_user_posts_use_case: FromDishka[GetUserPostsUseCase],
    jwt_service: FromDishka[JWTService],
    status: PostStatus | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> PageResponse[PostItem]:
    """List the caller's posts, hidden ones included."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await get_user_posts_use_case.execute(
        GetUserPostsRequest(
            user_id=user_id, status=status, search=search, page=page, limit=limit
        )
    )
    return PageResponse(data=result.posts, pagination=result.pagination)


@router.get("/prompts", response_model=PageResponse[PromptItem])
async def get_user_prompts(
    auth_token: SessionToken,
    list_prompts_use_case: FromDishka[ListPromptsUseCase],
    jwt_service: FromDishka[JWTService],
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> PageResponse[PromptItem]:
    """List the caller's prompts."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await list_prompts_use_case.execute(
        ListPromptsRequest(user_id=user_id, search=search, page=page, limit=limit)
    )
    return PageResponse(data=result.prompts, pagination=result.pagination)


@router.post("/avatar/presign", response_model=DataResponse[AvatarUpload])
async def presign_avatar_upload(
    auth_token: SessionToken,
    request: AvatarPresignAPIRequest,
    create_avatar_upload_use_case: FromDishka[CreateAvatarUploadUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[AvatarUpload]:
    """Get a presigned URL for uploading an avatar straight to storage.

    The client PUTs the image to ``upload_url`` with the returned headers,
    then calls ``PATCH /api/user/avatar`` with ``avatar_url``.
    """
    user_id = require_user_id(jwt_service, auth_token)
    upload = await create_avatar_upload_use_case.execute(
        CreateAvatarUploadRequest(user_id=user_id, **request.model_dump())
    )
    return DataResponse(data=upload)


@router.patch("/avatar", response_model=DataResponse[UpdateAvatarResponse])
async def update_avatar(
    auth_token: SessionToken,
    request: UpdateAvatarAPIRequest,
    update_avatar_use_case: FromDishka[UpdateAvatarUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[UpdateAvatarResponse]:
    """Set the caller's avatar to an uploaded image."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await update_avatar_use_case.execute(
        UpdateAvatarRequest(user_id=user_id, avatar_url=request.avatar_url)
    )
    return DataResponse(data=result)
