"""Unit tests for dependency wiring."""

from dashboards.config import Settings
from dashboards.infrastructure.dependencies import (
    build_dashboard_client,
    build_dashboard_repository,
)


def test_repository_uses_configured_page_size():
    repo = build_dashboard_repository(Settings(_env_file=None, dashboard_page_size=4))
    assert repo.page_size == 4
    assert len(repo) == 0


def test_client_points_at_configured_server():
    client = build_dashboard_client(
        Settings(
            _env_file=None,
            dashboard_server_url="http://dashboards.internal:9000/",
            dashboard_client_timeout=2.5,
        )
    )
    assert client._base_url == "http://dashboards.internal:9000"
    assert client._timeout == 2.5
