"""Data layer: holds the newest loaded region dataset and discards stale loads."""

from __future__ import annotations

from typing import Any, Protocol

from wilayah.infra.observability.logger import get_logger
from wilayah.infra.regions.dataset_loader import FetchFailure, RegionDataError
from wilayah.selection.models import RegionDataset

logger = get_logger(__name__)


class DatasetUnavailable(RegionDataError):
    """No dataset has been loaded successfully yet."""


class DatasetLoader(Protocol):
    @property
    def source(self) -> str: ...

    async def load(self) -> RegionDataset: ...


class RegionDatasetStore:
    """Apply a load result only when it belongs to the most recent attempt."""

    def __init__(self, loader: DatasetLoader) -> None:
        self._loader = loader
        self._dataset: RegionDataset | None = None
        self._generation = 0
        self._applied_generation = 0
        self._last_error: str | None = None

    @property
    def current(self) -> RegionDataset:
        if self._dataset is None:
            raise DatasetUnavailable("Region data has not been loaded.")
        return self._dataset

    @property
    def loaded(self) -> bool:
        return self._dataset is not None

    @property
    def generation(self) -> int:
        return self._generation

    async def refresh(self) -> RegionDataset:
        """Start a new load attempt; its result wins only if no newer attempt started."""
        self._generation += 1
        attempt = self._generation
        try:
            dataset = await self._loader.load()
        except FetchFailure as exc:
            if attempt == self._generation:
                self._last_error = str(exc)
            logger.warning("Region dataset load #%s failed: %s", attempt, exc)
            raise

        if attempt != self._generation:
            logger.info(
                "Discarding stale region dataset load #%s (newest is #%s)",
                attempt,
                self._generation,
            )
            return dataset

        self._dataset = dataset
        self._applied_generation = attempt
        self._last_error = None
        logger.info("Region dataset load #%s applied: %s", attempt, dataset.counts())
        return dataset

    def health(self) -> dict[str, Any]:
        """Expose load state for the health endpoint."""
        counts = self._dataset.counts() if self.loaded else {}
        return {
            "source": self._loader.source,
            "loaded": self.loaded,
            "generation": self._generation,
            "applied_generation": self._applied_generation,
            "last_error": self._last_error,
            **counts,
        }
