"""Post domain service."""

from uuid import uuid4

import logfire

from prompthub.domain.error import NotAuthorizedError, NotFoundError
from prompthub.domain.model.common import utcnow
from prompthub.domain.model.post import Post
from prompthub.domain.repository import PostRepository, PostSortOrder
from prompthub.domain.value import PostId, PostStatus, UserId, normalize_tags

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> Post:
        """Create an active post.

        Args:
            author_id: Author user ID
            title: Post title
            content: Prompt text
            description: Optional summary
            tags: Optional tags

        Returns:
            Created post
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                title=title,
                description=description,
                content=content,
                tags=normalize_tags(tags),
                status=PostStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a non-deleted post, whatever its status.

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post or post.is_deleted:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_visible_post(self, post_id: PostId) -> Post:
        """Get a post that is active and not deleted.

        Comments and likes only attach to visible posts.

        Raises:
            NotFoundError: If the post is missing, hidden or deleted
        """
        post = await self.get_post(post_id)
        if not post.is_visible:
            logfire.warn("Post is hidden", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post

    async def get_post_for_viewer(
        self, post_id: PostId, viewer_id: UserId | None
    ) -> Post:
        """Get a post as seen by a viewer.

        Hidden posts are only shown to their author.

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the post is hidden from the viewer
        """
        post = await self.get_post(post_id)
        if post.status != PostStatus.ACTIVE and post.author_id != viewer_id:
            raise NotAuthorizedError(
                "post", str(post_id), str(viewer_id) if viewer_id else None, "view"
            )
        return post

    async def get_owned_post(self, post_id: PostId, user_id: UserId) -> Post:
        """Get a post the user is allowed to change.

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the user is not the author
        """
        post = await self.get_post(post_id)
        if post.author_id != user_id:
            logfire.warn(
                "Post change by non-author", post_id=str(post_id), user_id=str(user_id)
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post

    async def update_post(
        self, post_id: PostId, user_id: UserId, changes: dict
    ) -> Post:
        """Apply a partial update to a post owned by the user.

        Args:
            post_id: Post ID
            user_id: Acting user
            changes: Fields to change, already validated

        Returns:
            Updated post
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            fields=sorted(changes),
        ):
            post = await self.get_owned_post(post_id, user_id)
            if "tags" in changes:
                changes = {**changes, "tags": normalize_tags(changes["tags"])}
            updated = Post.model_validate(
                {**post.model_dump(), **changes, "updated_at": utcnow()}
            )
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Soft delete a post owned by the user."""
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.get_owned_post(post_id, user_id)
            await self.post_repository.soft_delete(post_id, utcnow())
            logfire.info("Post deleted", post_id=str(post_id))

    async def list_posts(
        self,
        sort: PostSortOrder = PostSortOrder.LATEST,
        status: PostStatus | None = None,
        author_id: UserId | None = None,
        tag: str | None = None,
        search: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List non-deleted posts with the total matching count.

        Returns:
            Page of posts and the total number of matches
        """
        with logfire.span(
            "post_service.list_posts",
            sort=sort.value,
            status=status.value if status else None,
            tag=tag,
            limit=limit,
            offset=offset,
        ):
            filters = dict(status=status, author_id=author_id, tag=tag, search=search)
            posts = await self.post_repository.find_all(
                sort=sort, limit=limit, offset=offset, **filters
            )
            total = await self.post_repository.count(**filters)
            return posts, total

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment a post's comment count.

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.increment_comment_count", post_id=str(post_id)):
            await self.post_repository.increment_comment_count(post_id)
