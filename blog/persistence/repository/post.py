"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PageRequest, PostId, PostStatus, Slug, UserId
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.repository.query import contains_pattern
from blog.persistence.tables import (
    categories_table,
    post_tags_table,
    posts_table,
    tags_table,
)


def _published_conditions(
    category: Optional[Slug], tag: Optional[Slug], search: Optional[str]
) -> list:
    conditions = [
        posts_table.c.status == PostStatus.PUBLISHED.value,
        posts_table.c.active.is_(True),
    ]
    if category:
        category_id = (
            select(categories_table.c.id)
            .where(categories_table.c.slug == str(category))
            .scalar_subquery()
        )
        conditions.append(posts_table.c.category_id == category_id)
    if tag:
        tagged = (
            select(post_tags_table.c.post_id)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(
                and_(
                    tags_table.c.slug == str(tag),
                    post_tags_table.c.post_id == posts_table.c.id,
                )
            )
            .exists()
        )
        conditions.append(tagged)
    if search:
        pattern = contains_pattern(search)
        conditions.append(
            or_(
                posts_table.c.title.ilike(pattern, escape="\\"),
                posts_table.c.excerpt.ilike(pattern, escape="\\"),
                posts_table.c.content.ilike(pattern, escape="\\"),
            )
        )
    return conditions


def _author_conditions(author_id: UserId, status: Optional[PostStatus]) -> list:
    conditions = [
        posts_table.c.author_id == author_id,
        posts_table.c.active.is_(True),
    ]
    if status:
        conditions.append(posts_table.c.status == status.value)
    return conditions


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tag slugs for multiple posts in a single query.

        Returns:
            Dict mapping post_id -> tag slugs in display order
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table.c.slug)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.slug)
        return post_tag_map

    async def _rows_to_posts(self, rows) -> List[Post]:
        if not rows:
            return []
        post_tag_map = await self._fetch_tags_for_posts([row.id for row in rows])
        return [
            row_to_post(row._asdict(), tag_slugs=post_tag_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            posts = await self._rows_to_posts(result.fetchall())
            return posts[0] if posts else None

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            stmt = select(posts_table).where(posts_table.c.slug == str(slug))
            result = await self.session.execute(stmt)
            posts = await self._rows_to_posts(result.fetchall())
            return posts[0] if posts else None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug exists (globally - includes inactive posts)."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.slug == str(slug))
        )
        result = await self.session.execute(stmt)
        exists = (result.scalar() or 0) > 0
        logfire.debug("Slug existence check", slug=str(slug), exists=exists)
        return exists

    async def find_published(
        self,
        page: PageRequest,
        category: Optional[Slug] = None,
        tag: Optional[Slug] = None,
        search: Optional[str] = None,
    ) -> List[Post]:
        """Find published posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_published",
            category=str(category) if category else None,
            tag=str(tag) if tag else None,
            search=search,
            limit=page.limit,
            offset=page.offset,
        ):
            stmt = (
                select(posts_table)
                .where(*_published_conditions(category, tag, search))
                .order_by(
                    desc(posts_table.c.published_at).nulls_last(),
                    desc(posts_table.c.created_at),
                )
                .limit(page.limit)
                .offset(page.offset)
            )
            result = await self.session.execute(stmt)
            posts = await self._rows_to_posts(result.fetchall())
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count_published(
        self,
        category: Optional[Slug] = None,
        tag: Optional[Slug] = None,
        search: Optional[str] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*_published_conditions(category, tag, search))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        page: PageRequest,
        status: Optional[PostStatus] = None,
    ) -> List[Post]:
        stmt = (
            select(posts_table)
            .where(*_author_conditions(author_id, status))
            .order_by(desc(posts_table.c.created_at))
            .limit(page.limit)
            .offset(page.offset)
        )
        result = await self.session.execute(stmt)
        return await self._rows_to_posts(result.fetchall())

    async def count_by_author(
        self, author_id: UserId, status: Optional[PostStatus] = None
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*_author_conditions(author_id, status))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update) and replace its tag links.

        Counters are owned by the atomic increment methods and are never
        written back from the model on update.
        """
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            tags=[str(slug) for slug in post.tag_slugs],
        ):
            existing = await self.find_by_id(post.id)
            post_dict = post_to_dict(post)

            if existing:
                for counter in ("view_count", "comment_count"):
                    post_dict.pop(counter)
                await self.session.execute(
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post.id)
                )
            else:
                await self.session.execute(insert(posts_table).values(**post_dict))

            if post.tag_slugs:
                tag_result = await self.session.execute(
                    select(tags_table.c.id, tags_table.c.slug).where(
                        tags_table.c.slug.in_([str(slug) for slug in post.tag_slugs])
                    )
                )
                tag_id_map = {row.slug: row.id for row in tag_result.fetchall()}
                for position, slug in enumerate(post.tag_slugs):
                    tag_id = tag_id_map.get(str(slug))
                    if tag_id:
                        await self.session.execute(
                            insert(post_tags_table).values(
                                post_id=post.id, tag_id=tag_id, position=position
                            )
                        )

            await self.session.flush()
            logfire.info("Post saved", post_id=str(post.id))
            return post

    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment view_count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(view_count=posts_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_comment_count(self, post_id: PostId, delta: int) -> None:
        """Atomically add ``delta`` to comment_count (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                comment_count=func.greatest(posts_table.c.comment_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
