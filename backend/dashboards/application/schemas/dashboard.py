"""Pydantic DTOs (Data Transfer Objects) for the Dashboard feature."""

from pydantic import BaseModel, Field


class DashboardCreate(BaseModel):
    """Schema for creating a new dashboard.

    An empty ``name`` passes schema validation and is rejected by the store.
    """

    name: str = Field(..., examples=["Latency overview"])
    description: str = Field("", examples=["p50/p99 latency per service"])
    project: str = Field(..., min_length=1, examples=["proj-1234"])


class DashboardUpdate(BaseModel):
    """Schema for updating an existing dashboard — all fields optional."""

    name: str | None = Field(None, min_length=1)
    description: str | None = None


class DashboardResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    description: str
    project: str

    model_config = {"from_attributes": True}


class DashboardListResponse(BaseModel):
    """One page of dashboards. ``next`` is 0 when there are no further pages."""

    dashboards: list[DashboardResponse] = Field(default_factory=list)
    next: int = 0
