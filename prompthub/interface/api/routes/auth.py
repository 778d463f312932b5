"""Authentication routes."""

import logging
import re

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from prompthub.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UserItem,
)
from prompthub.config import Settings
from prompthub.interface.api.response import DataResponse, MessageResponse
from prompthub.interface.api.session import SessionToken

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

PASSWORD_PATTERN = re.compile(r"^(?=.*[a-zA-Z])(?=.*\d)[a-zA-Z\d]+$")
PHONE_PATTERN = re.compile(r"^1[3-9]\d{9}$")


class RegisterAPIRequest(BaseModel):
    """Sign up form."""

    email: EmailStr
    password: str = Field(min_length=8)
    confirm_password: str
    name: str = Field(min_length=1, max_length=50)
    phone: str | None = None

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if not PASSWORD_PATTERN.match(value):
            raise ValueError("Password must contain both letters and digits")
        return value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: str | None) -> str | None:
        if not value:
            return None
        if not PHONE_PATTERN.match(value):
            raise ValueError("Invalid phone number")
        return value

    @model_validator(mode="after")
    def check_passwords_match(self) -> "RegisterAPIRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginAPIRequest(BaseModel):
    """Login form."""

    email: EmailStr
    password: str = Field(min_length=1)


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie."""
    is_production = settings.is_production
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post("/register", response_model=DataResponse[UserItem])
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> DataResponse[UserItem]:
    """Create an account with email and password.

    Returns:
        The new user, without signing in
    """
    result = await register_use_case.execute(
        RegisterRequest(
            email=str(request.email),
            password=request.password,
            name=request.name,
            phone=request.phone,
        )
    )
    return DataResponse(data=result.user)


@router.post("/login", response_model=DataResponse[UserItem])
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> DataResponse[UserItem]:
    """Sign in and start a session.

    The session token is set in the ``auth.cookie_name`` cookie, valid for
    ``auth.jwt_expiry_days`` days.
    """
    result = await login_use_case.execute(
        LoginRequest(email=str(request.email), password=request.password)
    )
    set_session_cookie(response, result.token, settings)
    logger.info(f"User {result.user.id} signed in")
    return DataResponse(data=result.user)


@router.post("/logout", response_model=DataResponse[MessageResponse])
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> DataResponse[MessageResponse]:
    """End the session by clearing the cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return DataResponse(data=MessageResponse(message="Successfully logged out"))


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    auth_token: SessionToken,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetCurrentUserResponse:
    """Report the current session.

    Anonymous callers get ``{"authenticated": false, "user": null}`` rather
    than an error.
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=auth_token)
    )
