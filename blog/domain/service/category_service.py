"""Category domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from blog.domain.model.category import Category
from blog.domain.model.common import utcnow
from blog.domain.repository import CategoryRepository
from blog.domain.value import CategoryId, Slug

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def list_categories(self) -> List[Category]:
        with logfire.span("category_service.list_categories"):
            return await self.category_repository.find_all()

    async def create_category(
        self,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Category:
        """Create a category with a unique slug derived from its name."""
        with logfire.span("category_service.create_category", name=name):
            base = Slug.from_text(name, fallback="category")
            slug = base
            suffix = 1
            while await self.category_repository.find_by_slug(slug):
                suffix += 1
                slug = Slug(f"{base.root}-{suffix}")

            category = Category(
                id=CategoryId(uuid4()),
                name=name.strip(),
                slug=slug,
                description=description,
                color=color,
                created_at=utcnow(),
            )
            saved = await self.category_repository.save(category)
            logfire.info("Category created", category_id=str(saved.id), slug=str(slug))
            return saved
