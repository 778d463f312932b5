"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from prompthub.config import AuthSettings, Settings, StorageSettings
from prompthub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider, settings come from the environment and ``.env``.

    Tests and embedders can pass ready-made settings instead.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self._settings or Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage
