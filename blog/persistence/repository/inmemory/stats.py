"""In-memory dashboard statistics for testing."""

from typing import Optional

from blog.domain.repository.stats import StatsRepository
from blog.domain.value import UserRole

from .store import InMemoryStore


class InMemoryStatsRepository(StatsRepository):
    """Aggregates computed directly from the shared store."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def count_posts(self) -> int:
        return sum(1 for p in self._store.posts.values() if p.active)

    async def sum_post_views(self) -> int:
        return sum(p.view_count for p in self._store.posts.values() if p.active)

    async def count_users(self, role: Optional[UserRole] = None) -> int:
        return sum(
            1 for u in self._store.users.values() if role is None or u.role == role
        )

    async def count_categories(self) -> int:
        return len(self._store.categories)

    async def count_questions(self) -> int:
        return len(self._store.questions)

    async def count_answers(self) -> int:
        return len(self._store.answers)
