"""User aggregate root.

Users sign up with email and password. Email and phone are unique among
users that have not been deleted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from prompthub.domain.model.common import DomainModel, utcnow
from prompthub.domain.value import ACTIVE_SENTINEL, AuthorSummary, UserId
from prompthub.domain.value.types import UserRole, UserStatus


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: str
    password_hash: str
    name: Optional[str] = None
    phone: Optional[str] = None
    avatar: Optional[str] = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    deleted_at: datetime = ACTIVE_SENTINEL
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def can_sign_in(self) -> bool:
        return self.status == UserStatus.ACTIVE and self.deleted_at == ACTIVE_SENTINEL

    def to_summary(self) -> AuthorSummary:
        return AuthorSummary(id=self.id, name=self.name, avatar=self.avatar)
