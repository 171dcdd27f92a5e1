"""In-memory storage adapters."""

from .dashboard_repository import InMemoryDashboardRepository

__all__ = ["InMemoryDashboardRepository"]
