"""Create prompt use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import PromptService
from prompthub.domain.value import UserId

from .list_prompts import PromptItem


class CreatePromptRequest(BaseModel):
    """Create prompt request."""

    user_id: str
    title: str
    content: str
    description: str | None = None
    type: str | None = None


class CreatePromptUseCase:
    """Use case for saving a new prompt to one's library."""

    def __init__(self, prompt_service: PromptService) -> None:
        self.prompt_service = prompt_service

    async def execute(self, request: CreatePromptRequest) -> PromptItem:
        prompt = await self.prompt_service.create_prompt(
            author_id=UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
            description=request.description,
            type=request.type,
        )
        return PromptItem.from_prompt(prompt)
