"""PostgreSQL implementation of the dashboard statistics repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog.domain.repository import StatsRepository
from blog.domain.value import UserRole
from blog.persistence.tables import (
    answers_table,
    categories_table,
    posts_table,
    questions_table,
    users_table,
)


class PostgresStatsRepository(StatsRepository):
    """Runs each aggregate on its own short-lived session.

    An AsyncSession cannot run concurrent statements, so every query opens
    its own session from the factory and they can be awaited together.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def _scalar(self, stmt) -> int:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return int(result.scalar() or 0)

    async def count_posts(self) -> int:
        return await self._scalar(
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.active.is_(True))
        )

    async def sum_post_views(self) -> int:
        return await self._scalar(
            select(func.coalesce(func.sum(posts_table.c.view_count), 0)).where(
                posts_table.c.active.is_(True)
            )
        )

    async def count_users(self, role: Optional[UserRole] = None) -> int:
        stmt = select(func.count()).select_from(users_table)
        if role:
            stmt = stmt.where(users_table.c.role == role.value)
        return await self._scalar(stmt)

    async def count_categories(self) -> int:
        return await self._scalar(select(func.count()).select_from(categories_table))

    async def count_questions(self) -> int:
        return await self._scalar(select(func.count()).select_from(questions_table))

    async def count_answers(self) -> int:
        return await self._scalar(select(func.count()).select_from(answers_table))
