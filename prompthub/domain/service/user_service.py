"""User domain service."""

from uuid import uuid4

import logfire

from prompthub.config import AuthSettings
from prompthub.domain.error import NotFoundError, UnauthorizedError, ValidationError
from prompthub.domain.model import User
from prompthub.domain.model.common import utcnow
from prompthub.domain.repository import UserRepository
from prompthub.domain.value import AuthorSummary, UserId
from prompthub.domain.value.types import UserStatus
from prompthub.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (hash work factor)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
        phone: str | None = None,
    ) -> User:
        """Register a new user.

        Args:
            email: Login email, unique among active users
            password: Plain text password, already checked against the policy
            name: Display name
            phone: Optional phone number, unique among active users

        Returns:
            The created user

        Raises:
            ValidationError: If the email or phone is already registered
        """
        with logfire.span("user_service.register", email=email):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", email=email)
                raise ValidationError("This email is already registered")

            if phone and await self.user_repository.find_by_phone(phone):
                logfire.warn("Phone already registered")
                raise ValidationError("This phone number is already registered")

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                email=email,
                password_hash=hash_password(
                    password, rounds=self.auth_settings.password_hash_rounds
                ),
                name=name,
                phone=phone or None,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials.

        Returns:
            The signed-in user

        Raises:
            UnauthorizedError: If credentials are wrong or the account is disabled
        """
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Invalid credentials", email=email)
                raise UnauthorizedError("Invalid email or password")
            if user.status != UserStatus.ACTIVE:
                logfire.warn("Disabled account sign-in", user_id=str(user.id))
                raise UnauthorizedError("This account has been disabled")
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_summaries(
        self, user_ids: list[UserId]
    ) -> dict[UserId, AuthorSummary]:
        """Load author summaries for a batch of users in one query.

        Users that no longer exist get a summary with only their ID.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {
            user_id: users[user_id].to_summary()
            if user_id in users
            else AuthorSummary(id=user_id)
            for user_id in unique_ids
        }

    async def update_avatar(self, user_id: UserId, avatar_url: str) -> User:
        """Point the user's avatar at a new URL."""
        with logfire.span("user_service.update_avatar", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            updated = user.model_copy(
                update={"avatar": avatar_url, "updated_at": utcnow()}
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Avatar updated", user_id=str(user_id))
            return saved
