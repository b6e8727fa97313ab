"""Unit tests for newest-load-wins dataset refresh."""

from __future__ import annotations

import asyncio

import pytest

from wilayah.infra.regions.dataset_loader import FetchFailure
from wilayah.infra.regions.dataset_store import DatasetUnavailable, RegionDatasetStore
from wilayah.selection.models import Province, RegionDataset


def _dataset(name: str) -> RegionDataset:
    return RegionDataset(provinces=(Province(id=1, name=name),))


class _GatedLoader:
    """Each load waits on its own gate so tests control resolution order."""

    source = "memory://regions"

    def __init__(self, results: list) -> None:
        self._results = list(results)
        self.gates: list[asyncio.Event] = []

    async def load(self) -> RegionDataset:
        result = self._results.pop(0)
        gate = asyncio.Event()
        self.gates.append(gate)
        await gate.wait()
        if isinstance(result, Exception):
            raise result
        return result


def test_current_raises_before_first_load() -> None:
    store = RegionDatasetStore(_GatedLoader([]))

    assert store.loaded is False
    with pytest.raises(DatasetUnavailable):
        _ = store.current
    assert store.health()["loaded"] is False


def test_stale_load_does_not_overwrite_newer_one() -> None:
    older, newer = _dataset("older"), _dataset("newer")
    loader = _GatedLoader([older, newer])
    store = RegionDatasetStore(loader)

    async def scenario() -> tuple[RegionDataset, RegionDataset]:
        first = asyncio.create_task(store.refresh())
        await asyncio.sleep(0)
        second = asyncio.create_task(store.refresh())
        await asyncio.sleep(0)
        loader.gates[1].set()
        second_result = await second
        loader.gates[0].set()
        first_result = await first
        return first_result, second_result

    first_result, second_result = asyncio.run(scenario())

    assert first_result is older
    assert second_result is newer
    assert store.current is newer
    assert store.loaded is True
    assert store.health()["applied_generation"] == 2


def test_failure_keeps_previous_dataset_and_reports_error() -> None:
    loaded = _dataset("loaded")
    loader = _GatedLoader([loaded, FetchFailure("memory://regions", "HTTP 500")])
    store = RegionDatasetStore(loader)

    async def scenario() -> None:
        task = asyncio.create_task(store.refresh())
        await asyncio.sleep(0)
        loader.gates[0].set()
        await task

        task = asyncio.create_task(store.refresh())
        await asyncio.sleep(0)
        loader.gates[1].set()
        await task

    with pytest.raises(FetchFailure):
        asyncio.run(scenario())

    assert store.current is loaded
    health = store.health()
    assert health["loaded"] is True
    assert health["generation"] == 2
    assert "HTTP 500" in health["last_error"]
    assert health["provinces"] == 1


def test_stale_failure_does_not_record_error() -> None:
    newer = _dataset("newer")
    loader = _GatedLoader([FetchFailure("memory://regions", "timeout"), newer])
    store = RegionDatasetStore(loader)

    async def scenario() -> None:
        first = asyncio.create_task(store.refresh())
        await asyncio.sleep(0)
        second = asyncio.create_task(store.refresh())
        await asyncio.sleep(0)
        loader.gates[1].set()
        await second
        loader.gates[0].set()
        with pytest.raises(FetchFailure):
            await first

    asyncio.run(scenario())

    assert store.current is newer
    assert store.health()["last_error"] is None
