"""Dashboard server client package."""

from .dashboard_client import DashboardClient

__all__ = ["DashboardClient"]
