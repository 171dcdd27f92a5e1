from .dashboard_repository import DashboardRepository

__all__ = [
    "DashboardRepository",
]
