"""List prompts use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from prompthub.domain.model import Prompt
from prompthub.domain.service import PromptService
from prompthub.domain.value import Pagination, UserId


class PromptItem(BaseModel):
    """Prompt as shown to its author."""

    id: str
    title: str
    content: str
    description: str | None
    type: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_prompt(cls, prompt: Prompt) -> "PromptItem":
        return cls(
            id=str(prompt.id),
            title=prompt.title,
            content=prompt.content,
            description=prompt.description,
            type=prompt.type,
            created_at=prompt.created_at,
            updated_at=prompt.updated_at,
        )


class ListPromptsRequest(BaseModel):
    """List prompts request."""

    user_id: str
    search: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListPromptsResponse(BaseModel):
    """List prompts response."""

    prompts: list[PromptItem]
    pagination: Pagination


class ListPromptsUseCase:
    """Use case for browsing one's own prompt library."""

    def __init__(self, prompt_service: PromptService) -> None:
        self.prompt_service = prompt_service

    async def execute(self, request: ListPromptsRequest) -> ListPromptsResponse:
        prompts, total = await self.prompt_service.list_prompts(
            UserId(UUID(request.user_id)),
            search=request.search or None,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        return ListPromptsResponse(
            prompts=[PromptItem.from_prompt(p) for p in prompts],
            pagination=Pagination.build(request.page, request.limit, total),
        )
