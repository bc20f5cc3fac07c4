"""Dashboard statistics repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.value import UserRole


class StatsRepository(ABC):
    """Aggregate read queries for the admin dashboard.

    Each method must be safe to run concurrently with the others.
    """

    @abstractmethod
    async def count_posts(self) -> int:
        pass

    @abstractmethod
    async def sum_post_views(self) -> int:
        """Total view_count across all posts (0 when there are none)."""
        pass

    @abstractmethod
    async def count_users(self, role: Optional[UserRole] = None) -> int:
        pass

    @abstractmethod
    async def count_categories(self) -> int:
        pass

    @abstractmethod
    async def count_questions(self) -> int:
        pass

    @abstractmethod
    async def count_answers(self) -> int:
        pass
