"""Object storage infrastructure providers."""

from dishka import Scope, provide

from prompthub.adapter.storage import S3ObjectStorage
from prompthub.config import StorageSettings
from prompthub.domain.service import ObjectStorage
from prompthub.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Object storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider backed by an S3 compatible bucket."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_object_storage(self, storage_settings: StorageSettings) -> ObjectStorage:
        """Provide object storage client.

        The underlying boto3 client is created on first use, so the app
        starts without storage credentials.
        """
        return S3ObjectStorage(storage_settings)
