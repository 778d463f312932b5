"""Strongly typed identifiers for PromptHub domain entities.

Using NewType keeps post, comment and user ids from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
PromptId = NewType("PromptId", UUID)
