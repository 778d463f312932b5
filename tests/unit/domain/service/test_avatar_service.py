"""Unit tests for AvatarService."""

import re
from uuid import uuid4

import pytest

from prompthub.adapter.storage import MockObjectStorage
from prompthub.config import StorageSettings
from prompthub.domain.error import ValidationError
from prompthub.domain.service import AvatarService
from prompthub.domain.service.avatar_service import MAX_AVATAR_SIZE
from prompthub.domain.value import UserId


@pytest.fixture
def storage():
    return MockObjectStorage()


@pytest.fixture
def avatar_service(storage):
    return AvatarService(storage=storage, storage_settings=StorageSettings())


class TestCreateUpload:
    def test_presigns_under_user_prefix(self, avatar_service, storage):
        user_id = UserId(uuid4())

        upload = avatar_service.create_upload(
            user_id, filename="me.png", mime_type="image/png", size=1024
        )

        assert re.fullmatch(
            rf"avatars/{user_id}/\d+-[0-9a-f]{{6}}\.png", upload.object_key
        )
        assert upload.avatar_url == f"{storage.base_url}/{upload.object_key}"
        assert upload.expires_in == 300
        assert upload.headers == {"Content-Type": "image/png"}
        assert storage.presigned == [(upload.object_key, "image/png", 300)]

    def test_rejects_unsupported_type(self, avatar_service, storage):
        with pytest.raises(ValidationError, match="jpeg, png and webp"):
            avatar_service.create_upload(
                UserId(uuid4()), filename="me.gif", mime_type="image/gif", size=10
            )
        assert storage.presigned == []

    def test_rejects_images_over_2mb(self, avatar_service):
        with pytest.raises(ValidationError, match="2MB"):
            avatar_service.create_upload(
                UserId(uuid4()),
                filename="me.jpg",
                mime_type="image/jpeg",
                size=MAX_AVATAR_SIZE + 1,
            )

    def test_filename_without_extension(self, avatar_service):
        upload = avatar_service.create_upload(
            UserId(uuid4()), filename="avatar", mime_type="image/webp", size=1
        )

        assert "." not in upload.object_key.rsplit("/", 1)[-1]


class TestCheckAvatarUrl:
    def test_any_url_when_no_storage_configured(self, avatar_service):
        avatar_service.check_avatar_url("https://anywhere.example/a.png")

    def test_rejects_foreign_domain(self, storage):
        settings = StorageSettings(
            bucket="avatars-1250000000",
            region="ap-beijing",
            public_domain="https://cdn.prompthub.example",
        )
        service = AvatarService(storage=storage, storage_settings=settings)

        service.check_avatar_url("https://cdn.prompthub.example/avatars/a.png")
        service.check_avatar_url(
            "https://avatars-1250000000.s3.ap-beijing.amazonaws.com/avatars/a.png"
        )
        with pytest.raises(ValidationError, match="not allowed"):
            service.check_avatar_url("https://evil.example/a.png")
