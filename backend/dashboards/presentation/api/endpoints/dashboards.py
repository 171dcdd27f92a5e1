"""Dashboard CRUD endpoints."""

import re

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dashboards.application.schemas.dashboard import (
    DashboardCreate,
    DashboardListResponse,
    DashboardResponse,
    DashboardUpdate,
)
from dashboards.application.services import DashboardService
from dashboards.domain.exceptions import EntityNotFoundError, InvalidEntityError
from dashboards.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboards"])

_CURSOR_PATTERN = re.compile(r"[+-]?[0-9]+")


@router.post("/create", response_model=DashboardResponse, status_code=status.HTTP_201_CREATED)
async def create_dashboard(
    data: DashboardCreate,
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Create a new dashboard. The server assigns its ID."""
    try:
        dashboard = await service.create_dashboard(data)
    except InvalidEntityError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return DashboardResponse.model_validate(dashboard, from_attributes=True)


@router.get("/get", response_model=DashboardResponse)
async def get_dashboard(
    dashboard_id: str = Query("", alias="id"),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Retrieve a single dashboard by ID."""
    try:
        dashboard = await service.get_dashboard(dashboard_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DashboardResponse.model_validate(dashboard, from_attributes=True)


@router.put("/update", response_model=DashboardResponse)
async def update_dashboard(
    data: DashboardUpdate,
    dashboard_id: str = Query("", alias="id"),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """Update name and/or description. Omitted fields keep their value."""
    try:
        dashboard = await service.update_dashboard(dashboard_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DashboardResponse.model_validate(dashboard, from_attributes=True)


@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dashboard(
    dashboard_id: str = Query("", alias="id"),
    service: DashboardService = Depends(get_dashboard_service),
) -> None:
    """Delete a dashboard by ID."""
    try:
        await service.delete_dashboard(dashboard_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/list", response_model=DashboardListResponse)
async def list_dashboards(
    next: str = Query("", description="Offset returned by the previous page"),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardListResponse:
    """Retrieve one page of dashboards in insertion order."""
    cursor = 0
    if next:
        # Optional sign and ASCII digits only.
        if not _CURSOR_PATTERN.fullmatch(next):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid next value")
        cursor = int(next)

    try:
        page = await service.list_dashboards(cursor)
    except InvalidEntityError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid next value")

    return DashboardListResponse(
        dashboards=[
            DashboardResponse.model_validate(d, from_attributes=True) for d in page.dashboards
        ],
        next=page.next or 0,
    )
