"""PostgreSQL implementation of User repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import User
from blog.domain.repository import UserListItem, UserRepository
from blog.domain.value import Email, PageRequest, UserId, UserRole
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.repository.query import contains_pattern
from blog.persistence.tables import posts_table, users_table


def _listing_conditions(
    active: bool, search: Optional[str], role: Optional[UserRole]
) -> list:
    conditions = [users_table.c.active.is_(active)]
    if search:
        pattern = contains_pattern(search)
        conditions.append(
            or_(
                users_table.c.name.ilike(pattern, escape="\\"),
                users_table.c.email.ilike(pattern, escape="\\"),
            )
        )
    if role:
        conditions.append(users_table.c.role == role.value)
    return conditions


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_all(
        self,
        page: PageRequest,
        active: bool = True,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> List[UserListItem]:
        """Find users with their active post counts (one query)."""
        with logfire.span(
            "user_repository.find_all",
            active=active,
            search=search,
            role=role.value if role else None,
            limit=page.limit,
            offset=page.offset,
        ):
            post_counts = (
                select(
                    posts_table.c.author_id,
                    func.count().label("post_count"),
                )
                .where(posts_table.c.active.is_(True))
                .group_by(posts_table.c.author_id)
                .subquery()
            )
            stmt = (
                select(
                    users_table,
                    func.coalesce(post_counts.c.post_count, 0).label("post_count"),
                )
                .select_from(
                    users_table.outerjoin(
                        post_counts, post_counts.c.author_id == users_table.c.id
                    )
                )
                .where(*_listing_conditions(active, search, role))
                .order_by(desc(users_table.c.created_at))
                .limit(page.limit)
                .offset(page.offset)
            )
            result = await self.session.execute(stmt)
            items = []
            for row in result.fetchall():
                data = row._asdict()
                items.append(
                    UserListItem(user=row_to_user(data), post_count=data["post_count"])
                )
            return items

    async def count(
        self,
        active: bool = True,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(*_listing_conditions(active, search, role))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        if await self.find_by_id(user.id):
            stmt = (
                update(users_table).where(users_table.c.id == user.id).values(**user_dict)
            )
        else:
            stmt = insert(users_table).values(**user_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return user
