"""Application service (use case) for Dashboard operations."""

import logging

from dashboards.application.interfaces import DashboardRepository
from dashboards.application.schemas.dashboard import DashboardCreate, DashboardUpdate
from dashboards.domain.entities import Dashboard, DashboardPage

logger = logging.getLogger(__name__)


class DashboardService:
    """Orchestrates dashboard CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: DashboardRepository):
        self._repository = repository

    async def get_dashboard(self, dashboard_id: str) -> Dashboard:
        return await self._repository.get(dashboard_id)

    async def list_dashboards(self, cursor: int = 0) -> DashboardPage:
        return await self._repository.list(cursor)

    async def create_dashboard(self, data: DashboardCreate) -> Dashboard:
        dashboard = await self._repository.create(
            name=data.name,
            description=data.description,
            project=data.project,
        )
        logger.info("Created dashboard %s in project %s", dashboard.id, dashboard.project)
        return dashboard

    async def update_dashboard(self, dashboard_id: str, data: DashboardUpdate) -> Dashboard:
        dashboard = await self._repository.update(
            dashboard_id,
            name=data.name,
            description=data.description,
        )
        logger.info("Updated dashboard %s", dashboard_id)
        return dashboard

    async def delete_dashboard(self, dashboard_id: str) -> None:
        await self._repository.delete(dashboard_id)
        logger.info("Deleted dashboard %s", dashboard_id)
