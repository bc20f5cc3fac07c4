"""Dashboard use cases."""

from .get_dashboard_stats import GetDashboardStatsResponse, GetDashboardStatsUseCase

__all__ = ["GetDashboardStatsResponse", "GetDashboardStatsUseCase"]
