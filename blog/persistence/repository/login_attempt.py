"""PostgreSQL implementation of the login attempt repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import case, func, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog.domain.repository import LoginAttemptRepository
from blog.domain.value import UserId
from blog.persistence.tables import users_table


class PostgresLoginAttemptRepository(LoginAttemptRepository):
    """Commits each failed attempt on its own short-lived session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def record_failure(
        self, user_id: UserId, max_attempts: int, lock_until: datetime
    ) -> Optional[int]:
        attempts = users_table.c.login_attempts + 1
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(
                login_attempts=attempts,
                locked_until=case(
                    (attempts >= max_attempts, lock_until),
                    else_=users_table.c.locked_until,
                ),
                updated_at=func.now(),
            )
            .returning(users_table.c.login_attempts)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            count = result.scalar()
            await session.commit()
        logfire.debug("Failed login recorded", user_id=str(user_id), attempts=count)
        return count
