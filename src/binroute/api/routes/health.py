"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/directions", status_code=status.HTTP_200_OK)
async def health_directions(request: Request) -> dict:
    """Check directions service health."""
    healthy = await request.app.state.directions_client.check_health()
    return {"service": "directions", "healthy": healthy}
