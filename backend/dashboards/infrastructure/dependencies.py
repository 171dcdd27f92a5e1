"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from dashboards.config import Settings, get_settings
from dashboards.application.interfaces import DashboardRepository
from dashboards.application.services import DashboardService
from dashboards.infrastructure.client import DashboardClient
from dashboards.infrastructure.memory import InMemoryDashboardRepository


def build_dashboard_repository(settings: Settings | None = None) -> InMemoryDashboardRepository:
    """Create an empty in-memory store sized from settings."""
    settings = settings or get_settings()
    return InMemoryDashboardRepository(page_size=settings.dashboard_page_size)


def get_dashboard_repository(request: Request) -> DashboardRepository:
    """Returns the store owned by the running application."""
    return request.app.state.dashboard_repository


async def get_dashboard_service(
    repository: DashboardRepository = Depends(get_dashboard_repository),
) -> AsyncGenerator[DashboardService, None]:
    """Provides a DashboardService bound to the application's store."""
    yield DashboardService(repository)


def build_dashboard_client(settings: Settings | None = None) -> DashboardClient:
    """Provides a DashboardClient pointed at the configured server."""
    settings = settings or get_settings()
    return DashboardClient(
        base_url=settings.dashboard_server_url,
        timeout=settings.dashboard_client_timeout,
    )
