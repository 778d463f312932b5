"""Dependency injection wiring.

``PROVIDERS`` lists one entry per component. Entries without subclasses are
used as they are. Entries with subclasses are swappable infrastructure: the
production subclass serves the app, the mock subclass (registered by the test
suite) serves the tests.
"""

from typing import Type

from prompthub.util.di.application import ProdApplicationProvider
from prompthub.util.di.base import Component, ProviderBase
from prompthub.util.di.core import ProdConfigProvider
from prompthub.util.di.domain import ProdDomainProvider
from prompthub.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable
    PersistenceProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the provider class to instantiate.

    Raises:
        ValueError: If a swappable component lacks the requested variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    raise ValueError(
        f"{base.__mock_component__ or base.__name__} has no "
        f"{'mock' if use_mock else 'production'} provider"
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "ProviderBase",
    "StorageProvider",
    "get_provider",
]
