"""Unit tests for PromptService."""

from uuid import uuid4

import pytest

from prompthub.domain.error import NotFoundError
from prompthub.domain.model.prompt import DEFAULT_PROMPT_TYPE
from prompthub.domain.service import PromptService
from prompthub.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPromptService:
    @pytest.mark.asyncio
    async def test_create_defaults_type(self, unit_env):
        prompt_service = await unit_env.get(PromptService)

        prompt = await prompt_service.create_prompt(
            UserId(uuid4()), "Tutor", "Explain like I'm five"
        )

        assert prompt.type == DEFAULT_PROMPT_TYPE

    @pytest.mark.asyncio
    async def test_prompts_are_private_to_their_author(self, unit_env):
        prompt_service = await unit_env.get(PromptService)
        prompt = await prompt_service.create_prompt(UserId(uuid4()), "Mine", "Text")

        with pytest.raises(NotFoundError):
            await prompt_service.get_owned_prompt(prompt.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_deleted_prompt_is_gone(self, unit_env):
        # Arrange
        prompt_service = await unit_env.get(PromptService)
        author_id = UserId(uuid4())
        prompt = await prompt_service.create_prompt(author_id, "Mine", "Text")

        # Act
        await prompt_service.delete_prompt(prompt.id, author_id)

        # Assert
        with pytest.raises(NotFoundError):
            await prompt_service.get_owned_prompt(prompt.id, author_id)
        _, total = await prompt_service.list_prompts(author_id)
        assert total == 0

    @pytest.mark.asyncio
    async def test_list_is_most_recently_updated_first(self, unit_env):
        # Arrange
        prompt_service = await unit_env.get(PromptService)
        author_id = UserId(uuid4())
        older = await prompt_service.create_prompt(author_id, "Older", "Text")
        newer = await prompt_service.create_prompt(author_id, "Newer", "Text")
        await prompt_service.create_prompt(UserId(uuid4()), "Someone else", "Text")

        # Act
        await prompt_service.update_prompt(older.id, author_id, {"content": "Edited"})
        prompts, total = await prompt_service.list_prompts(author_id)

        # Assert
        assert [p.id for p in prompts] == [older.id, newer.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_search_filters_list(self, unit_env):
        prompt_service = await unit_env.get(PromptService)
        author_id = UserId(uuid4())
        await prompt_service.create_prompt(author_id, "SQL helper", "Write SQL")
        await prompt_service.create_prompt(author_id, "Poet", "Write a haiku")

        prompts, total = await prompt_service.list_prompts(author_id, search="haiku")

        assert total == 1
        assert prompts[0].title == "Poet"
