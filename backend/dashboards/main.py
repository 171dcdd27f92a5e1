"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from dashboards.config import Settings, get_settings
from dashboards.application.interfaces import DashboardRepository
from dashboards.infrastructure.dependencies import build_dashboard_repository
from dashboards.infrastructure.logging.log_config import setup_logging
from dashboards.presentation.api.error_handlers import register_error_handlers
from dashboards.presentation.api.router import router as api_router
from dashboards.presentation.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, announce the listener."""
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger.info("Server started at %s:%d", settings.host, settings.port)

    yield

    logger.info("Server stopped; in-memory dashboards discarded")


def create_app(
    settings: Settings | None = None,
    repository: DashboardRepository | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Each app owns its own store, so separate apps never share dashboards.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if repository is None:
        repository = build_dashboard_repository(settings)
    app.state.dashboard_repository = repository

    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dashboards.main:app",
        host=settings.host,
        port=settings.port,
    )
