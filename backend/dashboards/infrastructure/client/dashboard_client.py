"""Dashboard server HTTP client.

Talks to a running dashboard server over its JSON API using httpx.
Integrations use it to map their create/read/update/delete/list
operations onto server calls.
"""

import logging
from typing import Any

import httpx

from dashboards.domain.entities import Dashboard, DashboardPage
from dashboards.domain.exceptions import DashboardClientError

logger = logging.getLogger(__name__)


class DashboardClient:
    """Infrastructure adapter — connects to the dashboard server.

    When no ``http_client`` is injected, a short-lived ``httpx.AsyncClient``
    is opened per call and closed afterwards.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client
        self._owns_client = False

    async def __aenter__(self) -> "DashboardClient":
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_client = False

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        expected_status: int,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and raise DashboardClientError on any other status."""
        url = f"{self._base_url}{path}"

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(method, url, params=params, json=json)
            if response.status_code != expected_status:
                logger.warning(
                    "Dashboard server rejected %s: %d %s",
                    operation, response.status_code, response.text.strip(),
                )
                raise DashboardClientError(
                    operation=operation,
                    status_code=response.status_code,
                    message=response.text.strip(),
                )
            return response
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_dashboard(data: dict[str, Any]) -> Dashboard:
        return Dashboard(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
            project=data.get("project", ""),
        )

    async def create_dashboard(
        self, name: str, project: str, description: str = ""
    ) -> Dashboard:
        response = await self._request(
            "create",
            "POST",
            "/dashboard/create",
            expected_status=201,
            json={"name": name, "description": description, "project": project},
        )
        return self._parse_dashboard(response.json())

    async def get_dashboard(self, dashboard_id: str) -> Dashboard:
        response = await self._request(
            "get",
            "GET",
            "/dashboard/get",
            expected_status=200,
            params={"id": dashboard_id},
        )
        return self._parse_dashboard(response.json())

    async def update_dashboard(
        self,
        dashboard_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Dashboard:
        """Update a dashboard. Fields left as ``None`` are not sent."""
        payload: dict[str, Any] = {}
        if name is not None:
            payload["name"] = name
        if description is not None:
            payload["description"] = description

        response = await self._request(
            "update",
            "PUT",
            "/dashboard/update",
            expected_status=200,
            params={"id": dashboard_id},
            json=payload,
        )
        return self._parse_dashboard(response.json())

    async def delete_dashboard(self, dashboard_id: str) -> None:
        await self._request(
            "delete",
            "DELETE",
            "/dashboard/delete",
            expected_status=204,
            params={"id": dashboard_id},
        )

    async def list_dashboards(self, cursor: int | None = None) -> DashboardPage:
        """Fetch one page. Pass the returned page's ``next`` as ``cursor`` to get the following page."""
        params = {"next": str(cursor)} if cursor else None
        response = await self._request(
            "list",
            "GET",
            "/dashboard/list",
            expected_status=200,
            params=params,
        )
        data = response.json()
        return DashboardPage(
            dashboards=[self._parse_dashboard(d) for d in data.get("dashboards") or []],
            next=data.get("next") or None,
        )

    async def healthz(self) -> None:
        """Raise DashboardClientError unless the server reports healthy."""
        await self._request("healthz", "GET", "/healthz", expected_status=200)
