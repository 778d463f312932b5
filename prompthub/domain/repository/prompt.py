"""Prompt repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from prompthub.domain.model.prompt import Prompt
from prompthub.domain.value import PromptId, UserId


class PromptRepository(ABC):
    """Repository for Prompt entity.

    Prompts are only ever read by their author, so every query is scoped to
    one author and skips deleted prompts.
    """

    @abstractmethod
    async def find_owned(
        self, prompt_id: PromptId, author_id: UserId
    ) -> Optional[Prompt]:
        """Find a non-deleted prompt belonging to the author.

        Args:
            prompt_id: The prompt ID
            author_id: The expected owner

        Returns:
            The prompt, or None if missing, deleted or owned by someone else
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Prompt]:
        """Find an author's prompts, most recently updated first.

        Args:
            author_id: The author
            search: Substring matched against title, description and content
            limit: Maximum number of prompts to return
            offset: Number of prompts to skip

        Returns:
            List of prompts
        """
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, search: Optional[str] = None
    ) -> int:
        """Count an author's prompts matching the search."""
        pass

    @abstractmethod
    async def save(self, prompt: Prompt) -> Prompt:
        """Save a prompt (create or update).

        Args:
            prompt: The prompt to save

        Returns:
            The saved prompt
        """
        pass
