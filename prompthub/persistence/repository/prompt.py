"""PostgreSQL implementation of Prompt repository."""

from typing import List, Optional

from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from prompthub.domain.model import Prompt
from prompthub.domain.repository import PromptRepository
from prompthub.domain.value import ACTIVE_SENTINEL, PromptId, UserId
from prompthub.persistence.mappers import prompt_to_dict, row_to_prompt
from prompthub.persistence.tables import prompts_table


class PostgresPromptRepository(PromptRepository):
    """PostgreSQL implementation of PromptRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _owned_by(stmt: Select, author_id: UserId, search: Optional[str]) -> Select:
        stmt = stmt.where(
            prompts_table.c.author_id == author_id,
            prompts_table.c.deleted_at == ACTIVE_SENTINEL,
        )
        if search:
            stmt = stmt.where(
                or_(
                    prompts_table.c.title.contains(search, autoescape=True),
                    prompts_table.c.description.contains(search, autoescape=True),
                    prompts_table.c.content.contains(search, autoescape=True),
                )
            )
        return stmt

    async def find_owned(
        self, prompt_id: PromptId, author_id: UserId
    ) -> Optional[Prompt]:
        stmt = self._owned_by(select(prompts_table), author_id, None).where(
            prompts_table.c.id == prompt_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_prompt(row._asdict()) if row else None

    async def find_by_author(
        self,
        author_id: UserId,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Prompt]:
        stmt = (
            self._owned_by(select(prompts_table), author_id, search)
            .order_by(desc(prompts_table.c.updated_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_prompt(row._asdict()) for row in result.fetchall()]

    async def count_by_author(
        self, author_id: UserId, search: Optional[str] = None
    ) -> int:
        stmt = self._owned_by(
            select(func.count()).select_from(prompts_table), author_id, search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, prompt: Prompt) -> Prompt:
        """Save a prompt (create or update)."""
        prompt_dict = prompt_to_dict(prompt)
        stmt = select(prompts_table.c.id).where(prompts_table.c.id == prompt.id)
        exists = (await self.session.execute(stmt)).first() is not None

        if exists:
            stmt = (
                prompts_table.update()
                .where(prompts_table.c.id == prompt.id)
                .values(**prompt_dict)
            )
        else:
            stmt = prompts_table.insert().values(**prompt_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return prompt
