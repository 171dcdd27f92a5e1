"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from dashboards.presentation.api.endpoints.health import router as health_router
from dashboards.presentation.api.endpoints.dashboards import router as dashboards_router

router = APIRouter()
router.include_router(health_router)
router.include_router(dashboards_router)
