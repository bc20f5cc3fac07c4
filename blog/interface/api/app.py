"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings
from blog.interface.api.errors import KnownErrorMiddleware, register_exception_handlers
from blog.interface.api.routes import (
    admin,
    answers,
    auth,
    categories,
    comments,
    health,
    posts,
    questions,
    tags,
    users,
)
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function;
    scripts/start_app.py does that in production.

    Args:
        container: DI container to use. Tests pass one built with mock
            persistence; the production container is built otherwise.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quant Blog API",
        description="Blog and Q&A backend for a quantitative finance community",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    register_exception_handlers(app_instance)

    setup_di(app_instance, container or create_container())
    # Added after dishka so it wraps the request scope; CORS wraps both
    app_instance.add_middleware(KnownErrorMiddleware)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(users.router)
    app_instance.include_router(admin.router)

    return app_instance
