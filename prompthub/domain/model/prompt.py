"""Prompt entity.

Prompts are a user's private library of reusable prompt texts.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from prompthub.domain.model.common import DomainModel, utcnow
from prompthub.domain.value import ACTIVE_SENTINEL, PromptId, UserId

DEFAULT_PROMPT_TYPE = "BACKGROUND"


class Prompt(DomainModel):
    """Prompt owned by a single author."""

    id: PromptId
    author_id: UserId
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1)
    description: Optional[str] = None
    type: str = DEFAULT_PROMPT_TYPE
    deleted_at: datetime = ACTIVE_SENTINEL
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at != ACTIVE_SENTINEL
