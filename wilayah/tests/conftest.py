"""Test fixtures shared by unit/integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from wilayah.selection.models import District, Province, Regency, RegionDataset

SCENARIO_DOCUMENT = {
    "provinces": [
        {"id": 1, "name": "Aceh"},
        {"id": 2, "name": "Bali"},
    ],
    "regencies": [
        {"id": 10, "name": "Banda Aceh", "province_id": 1},
        {"id": 20, "name": "Denpasar", "province_id": 2},
        {"id": 21, "name": "Badung", "province_id": 2},
        {"id": 99, "name": "Orphan Regency", "province_id": 404},
    ],
    "districts": [
        {"id": 100, "name": "Baiturrahman", "regency_id": 10},
        {"id": 101, "name": "Meuraxa", "regency_id": 10},
        {"id": 200, "name": "Denpasar Barat", "regency_id": 20},
        {"id": 990, "name": "Orphan District", "regency_id": 99},
    ],
}


@pytest.fixture
def dataset() -> RegionDataset:
    return RegionDataset(
        provinces=tuple(Province(**row) for row in SCENARIO_DOCUMENT["provinces"]),
        regencies=tuple(Regency(**row) for row in SCENARIO_DOCUMENT["regencies"]),
        districts=tuple(District(**row) for row in SCENARIO_DOCUMENT["districts"]),
    )


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    path = tmp_path / "indonesia_regions.json"
    path.write_text(json.dumps(SCENARIO_DOCUMENT), encoding="utf-8")
    return path
