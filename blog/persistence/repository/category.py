"""PostgreSQL implementation of Category repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Category
from blog.domain.repository import CategoryRepository
from blog.domain.value import CategoryId, Slug
from blog.persistence.mappers import category_to_dict, row_to_category
from blog.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[Category]:
        stmt = select(categories_table).order_by(categories_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        stmt = select(categories_table).where(categories_table.c.slug == str(slug))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def save(self, category: Category) -> Category:
        category_dict = category_to_dict(category)
        if await self.find_by_id(category.id):
            stmt = (
                update(categories_table)
                .where(categories_table.c.id == category.id)
                .values(**category_dict)
            )
        else:
            stmt = insert(categories_table).values(**category_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return category
