"""PostgreSQL implementation of User repository."""

from typing import Dict, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from prompthub.domain.model import User
from prompthub.domain.repository import UserRepository
from prompthub.domain.value import ACTIVE_SENTINEL, UserId
from prompthub.persistence.mappers import row_to_user, user_to_dict
from prompthub.persistence.tables import users_table

active_users = select(users_table).where(users_table.c.deleted_at == ACTIVE_SENTINEL)


class PostgresUserRepository(UserRepository):
    """Users table access. Email and phone lookups only see active accounts."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt: Select) -> Optional[User]:
        row = (await self.session.execute(stmt)).mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(
            select(users_table).where(users_table.c.id == user_id)
        )

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Load several users in one round trip, keyed by ID."""
        if not user_ids:
            return {}
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        rows = (await self.session.execute(stmt)).mappings().all()
        return {user.id: user for user in (row_to_user(dict(r)) for r in rows)}

    async def find_by_email(self, email: str) -> Optional[User]:
        # Served by the unique (email, deleted_at) index
        return await self._first(active_users.where(users_table.c.email == email))

    async def find_by_phone(self, phone: str) -> Optional[User]:
        return await self._first(active_users.where(users_table.c.phone == phone))

    async def save(self, user: User) -> User:
        """Insert a new user or overwrite an existing row."""
        values = user_to_dict(user)
        if await self.find_by_id(user.id):
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**values)
            )
        else:
            stmt = users_table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return user
