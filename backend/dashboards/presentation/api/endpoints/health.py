"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter, Response, status

router = APIRouter(tags=["Health"])


@router.get("/healthz")
async def healthz() -> Response:
    """Always 200 with an empty body."""
    return Response(status_code=status.HTTP_200_OK)
