"""Admin dashboard statistics."""

import asyncio
from dataclasses import dataclass

import logfire

from blog.domain.repository import StatsRepository
from blog.domain.value import UserRole

from .base import Service


@dataclass(frozen=True)
class DashboardStats:
    """Aggregate counts shown on the admin dashboard."""

    total_posts: int
    total_views: int
    total_users: int
    total_authors: int
    total_categories: int
    total_questions: int
    total_answers: int


class DashboardService(Service):
    """Aggregates site-wide statistics."""

    def __init__(self, stats_repository: StatsRepository) -> None:
        self.stats_repository = stats_repository

    async def get_stats(self) -> DashboardStats:
        """Run the independent count queries concurrently and combine them."""
        with logfire.span("dashboard_service.get_stats"):
            stats = self.stats_repository
            (
                total_posts,
                total_views,
                total_users,
                total_authors,
                total_categories,
                total_questions,
                total_answers,
            ) = await asyncio.gather(
                stats.count_posts(),
                stats.sum_post_views(),
                stats.count_users(),
                stats.count_users(role=UserRole.ADMIN),
                stats.count_categories(),
                stats.count_questions(),
                stats.count_answers(),
            )
            result = DashboardStats(
                total_posts=total_posts,
                total_views=total_views,
                total_users=total_users,
                total_authors=total_authors,
                total_categories=total_categories,
                total_questions=total_questions,
                total_answers=total_answers,
            )
            logfire.info("Dashboard stats computed", **result.__dict__)
            return result
