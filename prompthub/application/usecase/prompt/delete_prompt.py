"""Delete prompt use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import PromptService
from prompthub.domain.value import PromptId, UserId


class DeletePromptRequest(BaseModel):
    """Delete prompt request."""

    prompt_id: UUID
    user_id: str


class DeletePromptUseCase:
    """Use case for soft deleting one of the user's prompts."""

    def __init__(self, prompt_service: PromptService) -> None:
        self.prompt_service = prompt_service

    async def execute(self, request: DeletePromptRequest) -> None:
        await self.prompt_service.delete_prompt(
            PromptId(request.prompt_id), UserId(UUID(request.user_id))
        )
