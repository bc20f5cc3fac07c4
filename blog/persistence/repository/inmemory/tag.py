"""In-memory tag repository for testing."""

from typing import Optional, Sequence

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import Slug, TagId

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_all(self) -> list[Tag]:
        return sorted(self._store.tags.values(), key=lambda t: t.name)

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        return self._store.tags.get(tag_id)

    async def find_by_slugs(self, slugs: Sequence[Slug]) -> list[Tag]:
        wanted = set(slugs)
        return [t for t in self._store.tags.values() if t.slug in wanted]

    async def save(self, tag: Tag) -> Tag:
        self._store.tags[tag.id] = tag
        return tag
