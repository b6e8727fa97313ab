"""Composition layer: build and hold long-lived service objects for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass

from wilayah.core.config import Settings
from wilayah.infra.regions.dataset_loader import RegionDatasetLoader
from wilayah.infra.regions.dataset_store import DatasetLoader, RegionDatasetStore


@dataclass
class AppContainer:
    """Container object attached to FastAPI app state."""

    settings: Settings
    regions: RegionDatasetStore


def build_container(settings: Settings, loader: DatasetLoader | None = None) -> AppContainer:
    """Construct runtime dependencies in one place."""
    if loader is None:
        loader = RegionDatasetLoader(
            settings.region_data_source,
            timeout_seconds=settings.region_fetch_timeout_seconds,
        )
    return AppContainer(settings=settings, regions=RegionDatasetStore(loader))
