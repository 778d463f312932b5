"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from prompthub.config import Settings
from prompthub.util.di import PROVIDERS, ProdConfigProvider, get_provider


def build_providers(
    use_mock: set[str] | None = None, settings: Settings | None = None
) -> list[Provider]:
    """Instantiate one provider per entry of ``PROVIDERS``.

    Args:
        use_mock: Mockable components to replace by their mock implementation
        settings: Settings to serve instead of loading them from the environment

    Returns:
        Provider instances
    """
    use_mock = use_mock or set()
    providers: list[Provider] = []
    for base in PROVIDERS:
        component = getattr(base, "__mock_component__", None)
        provider_class = get_provider(base, use_mock=component in use_mock)
        if provider_class is ProdConfigProvider:
            providers.append(ProdConfigProvider(settings))
        else:
            providers.append(provider_class())
    return providers


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Returns:
        Configured DI container with production providers
    """
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*build_providers(settings=settings), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
