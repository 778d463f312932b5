"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from prompthub.domain.model import Post
from prompthub.domain.repository.post import PostRepository, PostSortOrder
from prompthub.domain.value import ACTIVE_SENTINEL, PostId, PostStatus, UserId
from prompthub.persistence.mappers import post_to_dict, row_to_post
from prompthub.persistence.tables import posts_table

# Only ever changed through atomic increments
COUNTER_COLUMNS = {"like_count", "comment_count", "fork_count"}

SORT_COLUMNS = {
    PostSortOrder.LATEST: posts_table.c.created_at,
    PostSortOrder.POPULAR: posts_table.c.like_count,
    PostSortOrder.MOST_FORKED: posts_table.c.fork_count,
    PostSortOrder.RECENTLY_UPDATED: posts_table.c.updated_at,
}


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_filters(
        stmt: Select,
        status: Optional[PostStatus],
        author_id: Optional[UserId],
        tag: Optional[str],
        search: Optional[str],
    ) -> Select:
        stmt = stmt.where(posts_table.c.deleted_at == ACTIVE_SENTINEL)
        if status:
            stmt = stmt.where(posts_table.c.status == status.value)
        if author_id:
            stmt = stmt.where(posts_table.c.author_id == author_id)
        if tag:
            # Whole-tag match inside the comma-delimited column
            stmt = stmt.where(
                func.concat(",", posts_table.c.tags, ",").contains(
                    f",{tag},", autoescape=True
                )
            )
        if search:
            stmt = stmt.where(
                or_(
                    posts_table.c.title.contains(search, autoescape=True),
                    posts_table.c.description.contains(search, autoescape=True),
                    posts_table.c.content.contains(search, autoescape=True),
                )
            )
        return stmt

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.LATEST,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            tag=tag,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filters(
                select(posts_table), status, author_id, tag, search
            )
            stmt = (
                stmt.order_by(desc(SORT_COLUMNS[sort]), desc(posts_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count posts matching the given filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(posts_table),
            status,
            author_id,
            tag,
            search,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing = await self.find_by_id(post.id)
            post_dict = post_to_dict(post)

            if existing:
                values = {
                    k: v
                    for k, v in post_dict.items()
                    if k not in COUNTER_COLUMNS and k not in {"id", "created_at"}
                }
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**values)
                )
            else:
                stmt = posts_table.insert().values(**post_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return await self.find_by_id(post.id) or post

    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> None:
        """Overwrite the active sentinel with the deletion time."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(deleted_at=deleted_at, updated_at=deleted_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment_count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_like_count(self, post_id: PostId) -> int:
        """Atomically increment like_count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(like_count=posts_table.c.like_count + 1)
            .returning(posts_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar() or 0

    async def decrement_like_count(self, post_id: PostId) -> int:
        """Atomically decrement like_count by 1 (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(like_count=func.greatest(posts_table.c.like_count - 1, 0))
            .returning(posts_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar() or 0
