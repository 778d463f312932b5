"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from prompthub.domain.model.user import User
from prompthub.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Lookups by email and phone only consider users that are not deleted.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Find several users in one query.

        Args:
            user_ids: User IDs to load

        Returns:
            Mapping of ID to user for the users that exist
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the active user registered with an email."""
        pass

    @abstractmethod
    async def find_by_phone(self, phone: str) -> Optional[User]:
        """Find the active user registered with a phone number."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
