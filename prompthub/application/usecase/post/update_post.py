"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import PostService, UserService
from prompthub.domain.value import PostId, PostStatus, UserId

from .list_posts import PostItem, build_post_items


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only fields that were explicitly set are changed.
    """

    post_id: UUID
    user_id: str
    title: str | None = None
    description: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    status: PostStatus | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostItem


class UpdatePostUseCase:
    """Use case for editing a post. Only the author can edit."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the user is not the author
        """
        changes = request.model_dump(
            include={"title", "description", "content", "tags", "status"},
            exclude_unset=True,
        )
        post = await self.post_service.update_post(
            PostId(request.post_id), UserId(UUID(request.user_id)), changes
        )
        [item] = await build_post_items([post], self.user_service)
        return UpdatePostResponse(post=item)
