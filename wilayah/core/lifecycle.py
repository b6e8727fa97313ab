"""Lifecycle hooks: initial dataset load and shutdown diagnostics."""

from __future__ import annotations

from wilayah.core.container import AppContainer
from wilayah.infra.regions.dataset_loader import FetchFailure
from wilayah.infra.observability.logger import get_logger

logger = get_logger(__name__)


async def on_startup(container: AppContainer) -> None:
    if not container.settings.region_load_on_startup:
        logger.info("Region dataset load on startup disabled.")
        return
    try:
        await container.regions.refresh()
    except FetchFailure as exc:
        # Stay up so a reload can retry; dataset endpoints answer 503 meanwhile.
        logger.error("Region dataset unavailable at startup: %s", exc)
        return
    logger.info("Region store ready: %s", container.regions.health())


def on_shutdown() -> None:
    logger.info("Wilayah filter shutdown complete.")
