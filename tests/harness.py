"""Test harness for unit, integration and API tests.

Integration tests assume a PostgreSQL database is reachable at
``DATABASE__URL`` with migrations applied.
"""

from collections.abc import Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from prompthub.config import AuthSettings, Settings
from prompthub.interface.api.app import create_app
from prompthub.util.di import Component
from tests.di import build_test_container


def make_test_settings(**overrides) -> Settings:
    """Settings for tests: fast password hashing and a fixed JWT secret."""
    values = {
        "environment": "test",
        "auth": AuthSettings(jwt_secret="test-secret", password_hash_rounds=4),
    }
    values.update(overrides)
    return Settings(**values)


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            post = await service.create_post(...)
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(
            unmock=unmock or set(), settings=make_test_settings()
        )

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(**settings_overrides):
    """Factory for API client fixtures backed by a mocked container.

    Every test gets a fresh app and a fresh in-memory store.
    """

    @pytest.fixture
    def _client() -> Iterator[TestClient]:
        settings = make_test_settings(**settings_overrides)
        container = build_test_container(settings=settings, fastapi=True)
        app = create_app(settings=settings, container=container)
        with TestClient(app) as client:
            yield client

    return _client
