"""Get prompt use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import PromptService
from prompthub.domain.value import PromptId, UserId

from .list_prompts import PromptItem


class GetPromptRequest(BaseModel):
    """Get prompt request."""

    prompt_id: UUID
    user_id: str


class GetPromptUseCase:
    """Use case for opening one of the user's prompts."""

    def __init__(self, prompt_service: PromptService) -> None:
        self.prompt_service = prompt_service

    async def execute(self, request: GetPromptRequest) -> PromptItem:
        """Raises NotFoundError for prompts of other users."""
        prompt = await self.prompt_service.get_owned_prompt(
            PromptId(request.prompt_id), UserId(UUID(request.user_id))
        )
        return PromptItem.from_prompt(prompt)
