"""Session helpers for routes."""

from typing import Annotated

from fastapi import Depends, Request

from prompthub.config import Settings
from prompthub.domain.error import UnauthorizedError
from prompthub.domain.service import JWTService


def read_session_token(request: Request) -> str | None:
    """Session token from the cookie named by ``auth.cookie_name``."""
    settings: Settings = request.app.state.settings
    return request.cookies.get(settings.auth.cookie_name)


SessionToken = Annotated[str | None, Depends(read_session_token)]


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the signed-in user from the session cookie.

    Raises:
        UnauthorizedError: If the cookie is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise UnauthorizedError()
    return user_id
