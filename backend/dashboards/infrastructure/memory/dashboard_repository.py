"""In-memory dashboard store guarded by a single lock.

All dashboards live in one insertion-ordered list. Every operation holds
the lock for its whole duration, so reads and writes are totally ordered
and never interleave. Nothing inside the critical section awaits, which
also makes the store safe to call from worker threads.

Pagination uses a raw offset into the list. Creating or deleting between
two ``list`` calls can therefore skip or repeat entries.
"""

import logging
import random
import threading
from dataclasses import replace

from dashboards.application.interfaces import DashboardRepository
from dashboards.domain.entities import Dashboard, DashboardPage
from dashboards.domain.exceptions import EntityNotFoundError, InvalidEntityError
from dashboards.domain.identifiers import generate_external_id

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 2


class InMemoryDashboardRepository(DashboardRepository):
    """Implements the DashboardRepository port on a process-local list."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE, rng: random.Random | None = None):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._page_size = page_size
        self._rng = rng
        self._dashboards: list[Dashboard] = []
        self._lock = threading.Lock()

    @property
    def page_size(self) -> int:
        return self._page_size

    def __len__(self) -> int:
        with self._lock:
            return len(self._dashboards)

    def _index(self, dashboard_id: str) -> int:
        """Linear scan for the first match. Caller must hold the lock."""
        for i, dashboard in enumerate(self._dashboards):
            if dashboard.id == dashboard_id:
                return i
        raise EntityNotFoundError("Dashboard", dashboard_id)

    async def create(self, name: str, description: str, project: str) -> Dashboard:
        if not name:
            raise InvalidEntityError("Dashboard", "name", "must not be empty")

        with self._lock:
            # No collision check against live or deleted IDs.
            dashboard = Dashboard(
                id=generate_external_id(self._rng),
                name=name,
                description=description,
                project=project,
            )
            self._dashboards.append(dashboard)
            logger.debug("Stored dashboard %s (%d total)", dashboard.id, len(self._dashboards))
            return replace(dashboard)

    async def get(self, dashboard_id: str) -> Dashboard:
        with self._lock:
            return replace(self._dashboards[self._index(dashboard_id)])

    async def update(
        self,
        dashboard_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Dashboard:
        with self._lock:
            dashboard = self._dashboards[self._index(dashboard_id)]
            dashboard.update(name=name, description=description)
            return replace(dashboard)

    async def delete(self, dashboard_id: str) -> None:
        with self._lock:
            del self._dashboards[self._index(dashboard_id)]

    async def list(self, cursor: int = 0) -> DashboardPage:
        if cursor < 0:
            raise InvalidEntityError("Dashboard", "cursor", "must not be negative")

        with self._lock:
            end = cursor + self._page_size
            page = [replace(d) for d in self._dashboards[cursor:end]]
            next_cursor = end if end < len(self._dashboards) else None
            return DashboardPage(dashboards=page, next=next_cursor)
