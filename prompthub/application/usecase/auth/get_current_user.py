"""Get current user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from prompthub.domain.error import NotFoundError
from prompthub.domain.service import JWTService, UserService
from prompthub.domain.value import UserId

from .register import UserItem


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # JWT token from the session cookie


class GetCurrentUserResponse(BaseModel):
    """Session state, anonymous when there is no usable token."""

    authenticated: bool
    user: UserItem | None = None


class GetCurrentUserUseCase:
    """Use case for reading the current session. Never fails."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Resolve the session token to a user.

        Missing, invalid or expired tokens, and tokens of users that no
        longer sign in, all read as anonymous.
        """
        user_id = self.jwt_service.get_user_id_from_token(request.token)
        if not user_id:
            return GetCurrentUserResponse(authenticated=False)

        try:
            user = await self.user_service.get_by_id(UserId(UUID(user_id)))
        except NotFoundError:
            logfire.warn("Session for unknown user", user_id=user_id)
            return GetCurrentUserResponse(authenticated=False)

        if not user.can_sign_in:
            return GetCurrentUserResponse(authenticated=False)
        return GetCurrentUserResponse(authenticated=True, user=UserItem.from_user(user))
