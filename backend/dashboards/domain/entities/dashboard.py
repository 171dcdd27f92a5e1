"""Domain entities — the dashboard record and a page of dashboards."""

from dataclasses import dataclass, field


@dataclass
class Dashboard:
    """A dashboard owned by a project.

    ``id`` is assigned by the store and never changes afterwards; only
    ``name`` and ``description`` may be updated.
    """

    id: str
    name: str
    project: str
    description: str = ""

    def update(self, name: str | None = None, description: str | None = None) -> None:
        """Overwrite the mutable fields that were supplied."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description


@dataclass
class DashboardPage:
    """One page of a cursor-paginated listing.

    ``next`` is the offset to request the following page, or ``None``
    when this page is the last one.
    """

    dashboards: list[Dashboard] = field(default_factory=list)
    next: int | None = None
