"""Login use case."""

from pydantic import BaseModel

from prompthub.domain.service import JWTService, UserService

from .register import UserItem


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response.

    The token is set as the session cookie by the route.
    """

    token: str
    user: UserItem


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Verify credentials and that the account is active
        2. Issue a session token

        Raises:
            UnauthorizedError: If credentials are wrong or the account is disabled
        """
        user = await self.user_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.email, user.name)
        return LoginResponse(token=token, user=UserItem.from_user(user))
