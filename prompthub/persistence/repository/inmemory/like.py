"""In-memory like repository for testing."""

from typing import Optional, Sequence

from prompthub.domain.model.like import Like
from prompthub.domain.repository.like import LikeRepository
from prompthub.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository, keyed by (post_id, user_id)."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find(self, post_id: PostId, user_id: UserId) -> Optional[Like]:
        return self._store.likes.get((post_id, user_id))

    async def find_liked_post_ids(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        return {
            post_id for post_id in post_ids if (post_id, user_id) in self._store.likes
        }

    async def save(self, like: Like) -> bool:
        key = (like.post_id, like.user_id)
        if key in self._store.likes:
            return False
        self._store.likes[key] = like
        return True

    async def delete(self, post_id: PostId, user_id: UserId) -> bool:
        return self._store.likes.pop((post_id, user_id), None) is not None
