"""Abstract repository interface (port) for Dashboard storage."""

from abc import ABC, abstractmethod

from dashboards.domain.entities import Dashboard, DashboardPage


class DashboardRepository(ABC):
    """Port for dashboard storage — implemented in the infrastructure layer.

    Implementations assign identifiers themselves and hand out copies of
    stored dashboards. Missing IDs raise ``EntityNotFoundError``.
    """

    @abstractmethod
    async def create(self, name: str, description: str, project: str) -> Dashboard:
        """Store a new dashboard under a generated ID and return it.

        Raises ``InvalidEntityError`` when ``name`` is empty.
        """
        ...

    @abstractmethod
    async def get(self, dashboard_id: str) -> Dashboard:
        """Retrieve a single dashboard by its ID."""
        ...

    @abstractmethod
    async def update(
        self,
        dashboard_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Dashboard:
        """Overwrite name and/or description. ``None`` leaves a field unchanged."""
        ...

    @abstractmethod
    async def delete(self, dashboard_id: str) -> None:
        """Remove a dashboard, keeping the order of the others."""
        ...

    @abstractmethod
    async def list(self, cursor: int = 0) -> DashboardPage:
        """Return one page of dashboards starting at offset ``cursor``."""
        ...
