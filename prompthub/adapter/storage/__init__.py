"""Object storage adapters."""

from prompthub.adapter.storage.client import MockObjectStorage, S3ObjectStorage

__all__ = ["MockObjectStorage", "S3ObjectStorage"]
