"""In-memory category repository for testing."""

from typing import Optional

from blog.domain.model.category import Category
from blog.domain.repository.category import CategoryRepository
from blog.domain.value import CategoryId, Slug

from .store import InMemoryStore


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_all(self) -> list[Category]:
        return sorted(self._store.categories.values(), key=lambda c: c.name)

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self._store.categories.get(category_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        for category in self._store.categories.values():
            if category.slug == slug:
                return category
        return None

    async def save(self, category: Category) -> Category:
        self._store.categories[category.id] = category
        return category
