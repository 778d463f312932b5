"""Prompt use cases."""

from .create_prompt import CreatePromptRequest, CreatePromptUseCase
from .delete_prompt import DeletePromptRequest, DeletePromptUseCase
from .get_prompt import GetPromptRequest, GetPromptUseCase
from .list_prompts import (
    ListPromptsRequest,
    ListPromptsResponse,
    ListPromptsUseCase,
    PromptItem,
)
from .update_prompt import UpdatePromptRequest, UpdatePromptUseCase

__all__ = [
    "CreatePromptRequest",
    "CreatePromptUseCase",
    "DeletePromptRequest",
    "DeletePromptUseCase",
    "GetPromptRequest",
    "GetPromptUseCase",
    "ListPromptsRequest",
    "ListPromptsResponse",
    "ListPromptsUseCase",
    "PromptItem",
    "UpdatePromptRequest",
    "UpdatePromptUseCase",
]
