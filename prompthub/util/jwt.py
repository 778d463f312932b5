"""Session tokens.

A session is a signed JWT kept in the session cookie. It names the user and
expires ``auth.jwt_expiry_days`` after sign in. Nothing is stored server side.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pydantic
from pydantic import BaseModel

from prompthub.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    email: str
    name: str | None = None
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """The token is malformed, forged or expired."""

    pass


def create_token(
    user_id: str, email: str, name: str | None, settings: AuthSettings
) -> str:
    """Sign a session token.

    Args:
        user_id: User ID
        email: User email
        name: Display name, if the user has one
        settings: Authentication settings (secret, algorithm, lifetime)

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "email": email,
        "name": name,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a session token's signature and expiry and read its claims.

    Raises:
        JWTError: If the token does not verify or lacks the session claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except pydantic.ValidationError as e:
        raise JWTError("Invalid token") from e


def has_valid_session(token: str | None, settings: AuthSettings) -> bool:
    """Whether a session cookie value carries a verifiable token."""
    if not token:
        return False
    try:
        verify_token(token, settings)
    except JWTError:
        return False
    return True
