"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from discuss.interface.api.routes import comments, health, threads, users, votes
from discuss.util.di.container import create_container, setup_di
from discuss.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production container

    Returns:
        Configured application
    """
    app_instance = FastAPI(
        title="Discuss API",
        description="Threaded discussions with votes for posts and reviews",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(threads.posts_router)
    app_instance.include_router(threads.reviews_router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(users.router)

    return app_instance
