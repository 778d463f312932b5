"""Avatar upload domain service."""

import secrets
import time
from abc import ABC, abstractmethod

import logfire

from prompthub.config import StorageSettings
from prompthub.domain.error import ValidationError
from prompthub.domain.value import UserId
from prompthub.domain.value.common import ValueObject

from .base import Service

MAX_AVATAR_SIZE = 2 * 1024 * 1024  # 2 MB
ALLOWED_AVATAR_TYPES = ("image/jpeg", "image/png", "image/webp")


class ObjectStorage(ABC):
    """Object storage able to hand out presigned uploads.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    def presign_put(self, key: str, content_type: str, expires_in: int) -> str:
        """Create a URL the client can PUT the object to.

        Raises:
            StorageError: If storage is not configured or refuses to sign
        """
        pass

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public URL the object is served from once uploaded."""
        pass


class AvatarUpload(ValueObject):
    """Presigned avatar upload handed to the client."""

    upload_url: str
    avatar_url: str
    object_key: str
    expires_in: int
    headers: dict[str, str]


class AvatarService(Service):
    """Domain service for avatar uploads."""

    def __init__(self, storage: ObjectStorage, storage_settings: StorageSettings):
        self.storage = storage
        self.storage_settings = storage_settings

    def build_object_key(self, user_id: UserId, filename: str) -> str:
        """Build a unique object key ``{prefix}/{user_id}/{ms}-{rand}{ext}``.

        The extension is taken from the filename and capped at 10 characters.
        """
        ext = filename[filename.rindex(".") :][:10] if "." in filename else ""
        timestamp = int(time.time() * 1000)
        suffix = secrets.token_hex(3)
        prefix = self.storage_settings.avatar_prefix or "avatars"
        return f"{prefix}/{user_id}/{timestamp}-{suffix}{ext}"

    def create_upload(
        self, user_id: UserId, filename: str, mime_type: str, size: int
    ) -> AvatarUpload:
        """Presign an avatar upload for a user.

        Args:
            user_id: Uploading user
            filename: Original filename, used for the extension
            mime_type: Content type the client will upload
            size: Size in bytes

        Returns:
            Upload URL, resulting public URL and object key

        Raises:
            ValidationError: If the type is not an accepted image or it is too big
            StorageError: If presigning fails
        """
        with logfire.span(
            "avatar_service.create_upload",
            user_id=str(user_id),
            mime_type=mime_type,
            size=size,
        ):
            if mime_type not in ALLOWED_AVATAR_TYPES:
                raise ValidationError("Only jpeg, png and webp images are supported")
            if size > MAX_AVATAR_SIZE:
                raise ValidationError("Image must not exceed 2MB")

            key = self.build_object_key(user_id, filename)
            expires_in = self.storage_settings.presign_expiry_seconds
            upload_url = self.storage.presign_put(key, mime_type, expires_in)

            logfire.info("Avatar upload presigned", user_id=str(user_id), key=key)
            return AvatarUpload(
                upload_url=upload_url,
                avatar_url=self.storage.public_url(key),
                object_key=key,
                expires_in=expires_in,
                headers={"Content-Type": mime_type},
            )

    def check_avatar_url(self, avatar_url: str) -> None:
        """Reject avatar URLs outside the configured storage domains.

        Any URL is accepted when no storage domain is configured.

        Raises:
            ValidationError: If the URL points elsewhere
        """
        domains = self.storage_settings.allowed_avatar_domains
        if domains and not any(avatar_url.startswith(d) for d in domains):
            logfire.warn("Avatar URL outside storage domains", avatar_url=avatar_url)
            raise ValidationError("Avatar URL is not allowed")
