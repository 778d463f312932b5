"""Avatar use cases."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import AvatarService, AvatarUpload, UserService
from prompthub.domain.value import UserId


class CreateAvatarUploadRequest(BaseModel):
    """Presign request, defaults mirror a plain PNG upload."""

    user_id: str
    filename: str = "avatar.png"
    mime_type: str = "image/png"
    size: int = 0


class CreateAvatarUploadUseCase:
    """Use case for handing the client a presigned avatar upload."""

    def __init__(self, avatar_service: AvatarService) -> None:
        self.avatar_service = avatar_service

    async def execute(self, request: CreateAvatarUploadRequest) -> AvatarUpload:
        """Presign an upload.

        Raises:
            ValidationError: If the image type or size is not accepted
            StorageError: If storage is unavailable
        """
        return self.avatar_service.create_upload(
            UserId(UUID(request.user_id)),
            filename=request.filename,
            mime_type=request.mime_type,
            size=request.size,
        )


class UpdateAvatarRequest(BaseModel):
    """Update avatar request."""

    user_id: str
    avatar_url: str


class UpdateAvatarResponse(BaseModel):
    """Update avatar response."""

    avatar: str


class UpdateAvatarUseCase:
    """Use case for pointing the user's avatar at an uploaded image."""

    def __init__(
        self, avatar_service: AvatarService, user_service: UserService
    ) -> None:
        self.avatar_service = avatar_service
        self.user_service = user_service

    async def execute(self, request: UpdateAvatarRequest) -> UpdateAvatarResponse:
        """Store the avatar URL after checking it points at our storage.

        Raises:
            ValidationError: If the URL is outside the storage domains
        """
        self.avatar_service.check_avatar_url(request.avatar_url)
        user = await self.user_service.update_avatar(
            UserId(UUID(request.user_id)), request.avatar_url
        )
        return UpdateAvatarResponse(avatar=user.avatar or request.avatar_url)
