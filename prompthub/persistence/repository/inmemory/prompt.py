"""In-memory prompt repository for testing."""

from typing import Optional

from prompthub.domain.model.prompt import Prompt
from prompthub.domain.repository.prompt import PromptRepository
from prompthub.domain.value import PromptId, UserId

from .store import InMemoryStore, newest_first


class InMemoryPromptRepository(PromptRepository):
    """In-memory implementation of PromptRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _owned(self, author_id: UserId, search: Optional[str]) -> list[Prompt]:
        prompts = [
            p
            for p in self._store.prompts.values()
            if p.author_id == author_id and not p.is_deleted
        ]
        if search:
            prompts = [
                p
                for p in prompts
                if search in p.title
                or search in (p.description or "")
                or search in p.content
            ]
        return prompts

    async def find_owned(
        self, prompt_id: PromptId, author_id: UserId
    ) -> Optional[Prompt]:
        prompt = self._store.prompts.get(prompt_id)
        if not prompt or prompt.author_id != author_id or prompt.is_deleted:
            return None
        return prompt

    async def find_by_author(
        self,
        author_id: UserId,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Prompt]:
        prompts = newest_first(
            self._owned(author_id, search), key=lambda p: p.updated_at
        )
        return prompts[offset : offset + limit]

    async def count_by_author(
        self, author_id: UserId, search: Optional[str] = None
    ) -> int:
        return len(self._owned(author_id, search))

    async def save(self, prompt: Prompt) -> Prompt:
        self._store.prompts[prompt.id] = prompt
        return prompt
