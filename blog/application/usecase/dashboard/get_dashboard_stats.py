"""Dashboard statistics use case (admin)."""

import logfire
from pydantic import BaseModel

from blog.domain.service import DashboardService


class PostStats(BaseModel):
    total: int
    views: int


class UserStats(BaseModel):
    total: int
    authors: int


class CategoryStats(BaseModel):
    total: int


class QuestionStats(BaseModel):
    total: int
    answers: int


class GetDashboardStatsResponse(BaseModel):
    """Aggregate counts shown on the admin dashboard."""

    posts: PostStats
    users: UserStats
    categories: CategoryStats
    questions: QuestionStats


class GetDashboardStatsUseCase:
    """Use case for the admin dashboard numbers.

    The underlying counts are independent reads and are fetched
    concurrently by the dashboard service.
    """

    def __init__(self, dashboard_service: DashboardService) -> None:
        """Initialize dashboard stats use case.

        Args:
            dashboard_service: Dashboard domain service
        """
        self.dashboard_service = dashboard_service

    async def execute(self) -> GetDashboardStatsResponse:
        with logfire.span("get_dashboard_stats.execute"):
            stats = await self.dashboard_service.get_stats()
            return GetDashboardStatsResponse(
                posts=PostStats(total=stats.total_posts, views=stats.total_views),
                users=UserStats(total=stats.total_users, authors=stats.total_authors),
                categories=CategoryStats(total=stats.total_categories),
                questions=QuestionStats(
                    total=stats.total_questions, answers=stats.total_answers
                ),
            )
