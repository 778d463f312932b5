"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import PostService
from prompthub.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: UUID
    user_id: str


class DeletePostUseCase:
    """Use case for soft deleting a post. Only the author can delete."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        await self.post_service.delete_post(
            PostId(request.post_id), UserId(UUID(request.user_id))
        )
