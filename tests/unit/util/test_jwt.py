"""Unit tests for session token and password helpers."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from prompthub.config import AuthSettings
from prompthub.util.jwt import JWTError, create_token, has_valid_session, verify_token
from prompthub.util.password import hash_password, verify_password

SETTINGS = AuthSettings(jwt_secret="unit-secret")


class TestTokens:
    def test_round_trip(self):
        token = create_token("u-1", "ada@example.com", "Ada", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == "u-1"
        assert payload.name == "Ada"

    def test_wrong_secret_is_invalid(self):
        token = create_token("u-1", "ada@example.com", "Ada", SETTINGS)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="other-secret"))

    def test_expired_token(self):
        token = pyjwt.encode(
            {
                "user_id": "u-1",
                "email": "ada@example.com",
                "name": "Ada",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_token_without_session_claims_is_invalid(self):
        token = pyjwt.encode(
            {"sub": "u-1", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_has_valid_session_rejects_bad_cookies(self, token):
        assert has_valid_session(token, SETTINGS) is False

    def test_has_valid_session_accepts_token(self):
        token = create_token("u-1", "ada@example.com", None, SETTINGS)

        assert has_valid_session(token, SETTINGS) is True


class TestPasswords:
    def test_hash_verifies(self):
        hashed = hash_password("secret123", rounds=4)

        assert verify_password("secret123", hashed)
        assert not verify_password("secret124", hashed)

    def test_malformed_hash_never_matches(self):
        assert verify_password("secret123", "not-a-real-hash") is False
