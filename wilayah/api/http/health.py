"""HTTP API layer: health and readiness endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wilayah.api.deps import get_container
from wilayah.core.container import AppContainer

router = APIRouter(tags=["health"])


@router.get("/health")
def health(container: AppContainer = Depends(get_container)) -> dict:
    regions = container.regions.health()
    return {
        "status": "ok" if regions["loaded"] else "degraded",
        "regions": regions,
        "env": container.settings.env,
    }
