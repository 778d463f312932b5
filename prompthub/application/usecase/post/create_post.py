"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from prompthub.domain.service import PostService, UserService
from prompthub.domain.value import UserId

from .list_posts import PostItem, build_post_items


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    description: str | None = None
    tags: list[str] = []
    author_id: str  # User ID from authenticated user


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem


class CreatePostUseCase:
    """Use case for sharing a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Create an active post authored by the current user."""
        post = await self.post_service.create_post(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            content=request.content,
            description=request.description,
            tags=request.tags,
        )
        [item] = await build_post_items([post], self.user_service)
        return CreatePostResponse(post=item)
