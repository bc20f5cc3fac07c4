"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from blog.config import Settings
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str


@router.get("/health", response_model=ApiResponse[HealthResponse])
async def health_check(settings: FromDishka[Settings]) -> ApiResponse[HealthResponse]:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return ok(
        HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version="0.1.0",
            git_sha=settings.git_sha,
            environment=settings.environment,
        )
    )
