"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from prompthub.domain.model.post import Post
from prompthub.domain.repository.post import PostRepository, PostSortOrder
from prompthub.domain.value import PostId, PostStatus, UserId

from .store import InMemoryStore, newest_first

COUNTER_FIELDS = ("like_count", "comment_count", "fork_count")

SORT_KEYS = {
    PostSortOrder.LATEST: lambda p: (p.created_at,),
    PostSortOrder.POPULAR: lambda p: (p.like_count, p.created_at),
    PostSortOrder.MOST_FORKED: lambda p: (p.fork_count, p.created_at),
    PostSortOrder.RECENTLY_UPDATED: lambda p: (p.updated_at, p.created_at),
}


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _posts(self) -> dict[PostId, Post]:
        return self._store.posts

    def _matching(
        self,
        status: Optional[PostStatus],
        author_id: Optional[UserId],
        tag: Optional[str],
        search: Optional[str],
    ) -> list[Post]:
        posts = [p for p in self._posts.values() if not p.is_deleted]
        if status:
            posts = [p for p in posts if p.status == status]
        if author_id:
            posts = [p for p in posts if p.author_id == author_id]
        if tag:
            posts = [p for p in posts if tag in p.tags]
        if search:
            posts = [
                p
                for p in posts
                if search in p.title
                or search in (p.description or "")
                or search in p.content
            ]
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.LATEST,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        posts = newest_first(
            self._matching(status, author_id, tag, search), key=SORT_KEYS[sort]
        )
        return posts[offset : offset + limit]

    async def count(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._matching(status, author_id, tag, search))

    async def save(self, post: Post) -> Post:
        """Save a post, keeping stored counters on update."""
        existing = self._posts.get(post.id)
        if existing:
            post = post.model_copy(
                update={name: getattr(existing, name) for name in COUNTER_FIELDS}
            )
        self._posts[post.id] = post
        return post

    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"deleted_at": deleted_at, "updated_at": deleted_at}
            )

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment comment_count by 1."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comment_count": post.comment_count + 1}
            )

    async def increment_like_count(self, post_id: PostId) -> int:
        post = self._posts.get(post_id)
        if not post:
            return 0
        self._posts[post_id] = post.model_copy(
            update={"like_count": post.like_count + 1}
        )
        return post.like_count + 1

    async def decrement_like_count(self, post_id: PostId) -> int:
        """Decrement like_count by 1 (minimum 0)."""
        post = self._posts.get(post_id)
        if not post:
            return 0
        like_count = max(post.like_count - 1, 0)
        self._posts[post_id] = post.model_copy(update={"like_count": like_count})
        return like_count
