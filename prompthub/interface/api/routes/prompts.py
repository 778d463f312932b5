"""Prompt library routes. Prompts are private to their author."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from prompthub.application.usecase.prompt import (
    CreatePromptRequest,
    CreatePromptUseCase,
    DeletePromptRequest,
    DeletePromptUseCase,
    GetPromptRequest,
    GetPromptUseCase,
    ListPromptsRequest,
    ListPromptsUseCase,
    PromptItem,
    UpdatePromptRequest,
    UpdatePromptUseCase,
)
from prompthub.domain.service import JWTService
from prompthub.interface.api.response import (
    DataResponse,
    MessageResponse,
    PageResponse,
)
from prompthub.interface.api.session import SessionToken, require_user_id

router = APIRouter(prefix="/prompts", tags=["prompts"], route_class=DishkaRoute)


class CreatePromptAPIRequest(BaseModel):
    """API request for saving a prompt."""

    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1)
    description: str | None = None
    type: str | None = None


class UpdatePromptAPIRequest(BaseModel):
    """API request for editing a prompt, omitted fields are left alone."""

    title: str | None = Field(default=None, min_length=1, max_length=100)
    content: str | None = Field(default=None, min_length=1)
    description: str | None = None
    type: str | None = None


@router.get("", response_model=PageResponse[PromptItem])
async def list_prompts(
    auth_token: SessionToken,
    list_prompts_use_case: FromDishka[ListPromptsUseCase],
    jwt_service: FromDishka[JWTService],
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> PageResponse[PromptItem]:
    """List the caller's prompts, most recently updated first."""
    user_id = require_user_id(jwt_service, auth_token)
    result = await list_prompts_use_case.execute(
        ListPromptsRequest(user_id=user_id, search=search, page=page, limit=limit)
    )
    return PageResponse(data=result.prompts, pagination=result.pagination)


@router.post("", response_model=DataResponse[PromptItem])
async def create_prompt(
    auth_token: SessionToken,
    request: CreatePromptAPIRequest,
    create_prompt_use_case: FromDishka[CreatePromptUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[PromptItem]:
    """Save a new prompt."""
    user_id = require_user_id(jwt_service, auth_token)
    prompt = await create_prompt_use_case.execute(
        CreatePromptRequest(user_id=user_id, **request.model_dump())
    )
    return DataResponse(data=prompt)


@router.get("/{prompt_id}", response_model=DataResponse[PromptItem])
async def get_prompt(
    auth_token: SessionToken,
    prompt_id: UUID,
    get_prompt_use_case: FromDishka[GetPromptUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[PromptItem]:
    """Get one of the caller's prompts."""
    user_id = require_user_id(jwt_service, auth_token)
    prompt = await get_prompt_use_case.execute(
        GetPromptRequest(prompt_id=prompt_id, user_id=user_id)
    )
    return DataResponse(data=prompt)


@router.patch("/{prompt_id}", response_model=DataResponse[PromptItem])
async def update_prompt(
    auth_token: SessionToken,
    prompt_id: UUID,
    request: UpdatePromptAPIRequest,
    update_prompt_use_case: FromDishka[UpdatePromptUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[PromptItem]:
    """Edit one of the caller's prompts."""
    user_id = require_user_id(jwt_service, auth_token)
    prompt = await update_prompt_use_case.execute(
        UpdatePromptRequest(
            prompt_id=prompt_id,
            user_id=user_id,
            **request.model_dump(exclude_unset=True),
        )
    )
    return DataResponse(data=prompt)


@router.delete("/{prompt_id}", response_model=DataResponse[MessageResponse])
async def delete_prompt(
    auth_token: SessionToken,
    prompt_id: UUID,
    delete_prompt_use_case: FromDishka[DeletePromptUseCase],
    jwt_service: FromDishka[JWTService],
) -> DataResponse[MessageResponse]:
    """Soft delete one of the caller's prompts."""
    user_id = require_user_id(jwt_service, auth_token)
    await delete_prompt_use_case.execute(
        DeletePromptRequest(prompt_id=prompt_id, user_id=user_id)
    )
    return DataResponse(data=MessageResponse(message="Prompt deleted"))
