"""PostgreSQL implementation of Like repository."""

from typing import Optional, Sequence, Set

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.domain.model import Like
from prompthub.domain.repository import LikeRepository
from prompthub.domain.value import PostId, UserId
from prompthub.persistence.mappers import like_to_dict, row_to_like
from prompthub.persistence.tables import post_likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository.

    The (post_id, user_id) unique constraint makes concurrent likes by the
    same user collapse into one row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, post_id: PostId, user_id: UserId) -> Optional[Like]:
        stmt = select(post_likes_table).where(
            post_likes_table.c.post_id == post_id,
            post_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_liked_post_ids(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> Set[PostId]:
        if not post_ids:
            return set()
        stmt = select(post_likes_table.c.post_id).where(
            post_likes_table.c.user_id == user_id,
            post_likes_table.c.post_id.in_(list(post_ids)),
        )
        result = await self.session.execute(stmt)
        return {PostId(row.post_id) for row in result.fetchall()}

    async def save(self, like: Like) -> bool:
        """Insert a like, doing nothing if the user already liked the post."""
        stmt = (
            insert(post_likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(constraint="uq_post_likes_post_user")
            .returning(post_likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    async def delete(self, post_id: PostId, user_id: UserId) -> bool:
        stmt = (
            delete(post_likes_table)
            .where(
                post_likes_table.c.post_id == post_id,
                post_likes_table.c.user_id == user_id,
            )
            .returning(post_likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted
