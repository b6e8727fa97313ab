"""API layer: dependency helpers to access shared container from request state."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from wilayah.core.container import AppContainer
from wilayah.infra.regions.dataset_store import DatasetUnavailable
from wilayah.selection.models import RegionDataset


def get_container(request: Request) -> AppContainer:
    return request.app.state.container  # type: ignore[return-value]


def get_dataset(container: AppContainer = Depends(get_container)) -> RegionDataset:
    try:
        return container.regions.current
    except DatasetUnavailable as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
