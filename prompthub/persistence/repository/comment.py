"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.domain.model import Comment
from prompthub.domain.repository import CommentRepository
from prompthub.domain.value import ACTIVE_SENTINEL, CommentId, PostId
from prompthub.persistence.mappers import comment_to_dict, row_to_comment
from prompthub.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(self, post_id: PostId) -> List[Comment]:
        """Find the active top-level comments of a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_comment_id.is_(None))
            .where(comments_table.c.deleted_at == ACTIVE_SENTINEL)
            .order_by(comments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find the active direct replies of a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id == parent_id)
            .where(comments_table.c.deleted_at == ACTIVE_SENTINEL)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_replies(
        self, parent_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count active direct replies with a single GROUP BY."""
        counts: Dict[CommentId, int] = {parent_id: 0 for parent_id in parent_ids}
        if not parent_ids:
            return counts

        stmt = (
            select(comments_table.c.parent_comment_id, func.count())
            .where(comments_table.c.parent_comment_id.in_(list(parent_ids)))
            .where(comments_table.c.deleted_at == ACTIVE_SENTINEL)
            .group_by(comments_table.c.parent_comment_id)
        )
        result = await self.session.execute(stmt)
        for parent_id, count in result.fetchall():
            counts[CommentId(parent_id)] = count
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(reply_count=comments_table.c.reply_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
