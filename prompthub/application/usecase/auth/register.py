"""Register use case."""

from datetime import datetime

from pydantic import BaseModel

from prompthub.domain.model import User
from prompthub.domain.service import UserService
from prompthub.domain.value.types import UserRole, UserStatus


class UserItem(BaseModel):
    """Account details visible to the account owner."""

    id: str
    email: str
    name: str | None
    phone: str | None
    avatar: str | None
    role: UserRole
    status: UserStatus
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            phone=user.phone,
            avatar=user.avatar,
            role=user.role,
            status=user.status,
            created_at=user.created_at,
        )


class RegisterRequest(BaseModel):
    """Register request, password policy already checked."""

    email: str
    password: str
    name: str | None = None
    phone: str | None = None


class RegisterResponse(BaseModel):
    """Register response."""

    user: UserItem


class RegisterUseCase:
    """Use case for signing up with email and password."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Create the account.

        Raises:
            ValidationError: If the email or phone is already registered
        """
        user = await self.user_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
            phone=request.phone,
        )
        return RegisterResponse(user=UserItem.from_user(user))
