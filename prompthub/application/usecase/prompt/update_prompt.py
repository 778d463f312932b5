"""Update prompt use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import PromptService
from prompthub.domain.value import PromptId, UserId

from .list_prompts import PromptItem


class UpdatePromptRequest(BaseModel):
    """Update prompt request, only explicitly set fields change."""

    prompt_id: UUID
    user_id: str
    title: str | None = None
    content: str | None = None
    description: str | None = None
    type: str | None = None


class UpdatePromptUseCase:
    """Use case for editing one of the user's prompts."""

    def __init__(self, prompt_service: PromptService) -> None:
        self.prompt_service = prompt_service

    async def execute(self, request: UpdatePromptRequest) -> PromptItem:
        changes = request.model_dump(
            include={"title", "content", "description", "type"}, exclude_unset=True
        )
        prompt = await self.prompt_service.update_prompt(
            PromptId(request.prompt_id), UserId(UUID(request.user_id)), changes
        )
        return PromptItem.from_prompt(prompt)
