"""PostgreSQL implementation of Tag repository."""

from typing import List, Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Tag
from blog.domain.repository import TagRepository
from blog.domain.value import Slug, TagId
from blog.persistence.mappers import row_to_tag, tag_to_dict
from blog.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[Tag]:
        stmt = select(tags_table).order_by(tags_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_slugs(self, slugs: Sequence[Slug]) -> List[Tag]:
        if not slugs:
            return []
        stmt = select(tags_table).where(
            tags_table.c.slug.in_([str(slug) for slug in slugs])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def save(self, tag: Tag) -> Tag:
        tag_dict = tag_to_dict(tag)
        if await self.find_by_id(tag.id):
            stmt = update(tags_table).where(tags_table.c.id == tag.id).values(**tag_dict)
        else:
            stmt = insert(tags_table).values(**tag_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return tag
