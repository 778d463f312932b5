"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class StorageError(AdapterError):
    """Object storage is unavailable or rejected the request."""

    pass
