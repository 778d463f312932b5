"""Prompt domain service."""

from uuid import uuid4

import logfire

from prompthub.domain.error import NotFoundError
from prompthub.domain.model.common import utcnow
from prompthub.domain.model.prompt import DEFAULT_PROMPT_TYPE, Prompt
from prompthub.domain.repository import PromptRepository
from prompthub.domain.value import PromptId, UserId

from .base import Service


class PromptService(Service):
    """Domain service for a user's private prompt library.

    A prompt owned by someone else is reported as not found.
    """

    def __init__(self, prompt_repository: PromptRepository) -> None:
        self.prompt_repository = prompt_repository

    async def create_prompt(
        self,
        author_id: UserId,
        title: str,
        content: str,
        description: str | None = None,
        type: str | None = None,
    ) -> Prompt:
        with logfire.span("prompt_service.create_prompt", author_id=str(author_id)):
            now = utcnow()
            prompt = Prompt(
                id=PromptId(uuid4()),
                author_id=author_id,
                title=title,
                content=content,
                description=description,
                type=type or DEFAULT_PROMPT_TYPE,
                created_at=now,
                updated_at=now,
            )
            saved = await self.prompt_repository.save(prompt)
            logfire.info("Prompt created", prompt_id=str(saved.id))
            return saved

    async def get_owned_prompt(self, prompt_id: PromptId, user_id: UserId) -> Prompt:
        """Get one of the user's prompts.

        Raises:
            NotFoundError: If missing, deleted or owned by another user
        """
        with logfire.span("prompt_service.get_owned_prompt", prompt_id=str(prompt_id)):
            prompt = await self.prompt_repository.find_owned(prompt_id, user_id)
            if not prompt:
                logfire.warn(
                    "Prompt not found for user",
                    prompt_id=str(prompt_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Prompt", str(prompt_id))
            return prompt

    async def list_prompts(
        self,
        author_id: UserId,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Prompt], int]:
        """List the author's prompts, most recently updated first, with the total."""
        with logfire.span("prompt_service.list_prompts", author_id=str(author_id)):
            prompts = await self.prompt_repository.find_by_author(
                author_id, search=search, limit=limit, offset=offset
            )
            total = await self.prompt_repository.count_by_author(author_id, search)
            return prompts, total

    async def update_prompt(
        self, prompt_id: PromptId, user_id: UserId, changes: dict
    ) -> Prompt:
        with logfire.span(
            "prompt_service.update_prompt",
            prompt_id=str(prompt_id),
            fields=sorted(changes),
        ):
            prompt = await self.get_owned_prompt(prompt_id, user_id)
            updated = Prompt.model_validate(
                {**prompt.model_dump(), **changes, "updated_at": utcnow()}
            )
            return await self.prompt_repository.save(updated)

    async def delete_prompt(self, prompt_id: PromptId, user_id: UserId) -> None:
        """Soft delete one of the user's prompts."""
        with logfire.span("prompt_service.delete_prompt", prompt_id=str(prompt_id)):
            prompt = await self.get_owned_prompt(prompt_id, user_id)
            await self.prompt_repository.save(
                prompt.model_copy(update={"deleted_at": utcnow()})
            )
            logfire.info("Prompt deleted", prompt_id=str(prompt_id))
