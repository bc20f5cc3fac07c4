"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.category import Category
from blog.domain.value import CategoryId, Slug


class CategoryRepository(ABC):
    """Repository for Category entity."""

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """List all categories ordered by name."""
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find a category by slug."""
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        pass
