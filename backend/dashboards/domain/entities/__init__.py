from .dashboard import Dashboard, DashboardPage

__all__ = [
    "Dashboard",
    "DashboardPage",
]
