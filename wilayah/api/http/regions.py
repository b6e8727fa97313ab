"""HTTP API layer: whole-dataset read and reload endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from wilayah.api.deps import get_container, get_dataset
from wilayah.core.container import AppContainer
from wilayah.infra.regions.dataset_loader import FetchFailure
from wilayah.protocol.messages import RegionDatasetDto, dataset_dto
from wilayah.selection.models import RegionDataset

router = APIRouter(prefix="/api/v1/regions", tags=["regions"])


@router.get("", response_model=RegionDatasetDto)
def get_regions(dataset: RegionDataset = Depends(get_dataset)) -> RegionDatasetDto:
    return dataset_dto(dataset)


@router.post("/reload")
async def reload_regions(container: AppContainer = Depends(get_container)) -> dict:
    try:
        dataset = await container.regions.refresh()
    except FetchFailure as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return {
        "status": "reloaded",
        "generation": container.regions.generation,
        **dataset.counts(),
    }
