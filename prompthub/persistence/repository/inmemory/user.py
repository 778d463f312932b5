"""In-memory user repository for testing."""

from typing import Optional, Sequence

from prompthub.domain.model.user import User
from prompthub.domain.repository.user import UserRepository
from prompthub.domain.value import ACTIVE_SENTINEL, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the active user with an email."""
        for user in self._users.values():
            if user.email == email and user.deleted_at == ACTIVE_SENTINEL:
                return user
        return None

    async def find_by_phone(self, phone: str) -> Optional[User]:
        """Find the active user with a phone number."""
        for user in self._users.values():
            if user.phone == phone and user.deleted_at == ACTIVE_SENTINEL:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
