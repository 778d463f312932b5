"""S3-compatible object storage client.

Works against AWS S3 or any S3-compatible service (Tencent COS, MinIO)
through ``StorageSettings.endpoint_url``.
"""

import boto3
import logfire
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from prompthub.adapter.error import StorageError
from prompthub.config import StorageSettings
from prompthub.domain.service.avatar_service import ObjectStorage


class S3ObjectStorage(ObjectStorage):
    """Object storage backed by boto3.

    The boto3 client is created on first use, so the app starts without
    storage credentials and only avatar uploads fail.
    """

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize storage client.

        Args:
            settings: Storage settings
        """
        self.settings = settings
        self._client = None

    def _get_client(self):
        if not self.settings.is_configured:
            raise StorageError(
                "Object storage is not configured: "
                "secret id, secret key, bucket and region are required"
            )
        if self._client is None:
            self._client = boto3.client(
                "s3",
                aws_access_key_id=self.settings.secret_id,
                aws_secret_access_key=self.settings.secret_key,
                region_name=self.settings.region,
                endpoint_url=self.settings.endpoint_url,
                config=Config(
                    signature_version="s3v4", s3={"addressing_style": "virtual"}
                ),
            )
        return self._client

    def presign_put(self, key: str, content_type: str, expires_in: int) -> str:
        client = self._get_client()
        try:
            return client.generate_presigned_url(
                ClientMethod="put_object",
                Params={
                    "Bucket": self.settings.bucket,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logfire.error("Presigning upload failed", key=key, error=str(e))
            raise StorageError(f"Failed to presign upload: {e}") from e

    def public_url(self, key: str) -> str:
        base = self.settings.public_domain or self.settings.bucket_url
        if not base:
            raise StorageError(
                "Object storage is not configured: bucket and region are required"
            )
        return f"{base.rstrip('/')}/{key.lstrip('/')}"


class MockObjectStorage(ObjectStorage):
    """In-process storage for tests.

    Records every presigned key and returns predictable URLs.
    """

    base_url = "https://storage.test"

    def __init__(self) -> None:
        self.presigned: list[tuple[str, str, int]] = []

    def presign_put(self, key: str, content_type: str, expires_in: int) -> str:
        self.presigned.append((key, content_type, expires_in))
        return f"{self.base_url}/{key}?X-Amz-Expires={expires_in}&X-Amz-Signature=mock"

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/{key}"
