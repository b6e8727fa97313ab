"""Unit tests for filter page display state."""

from __future__ import annotations

from wilayah.selection.derivation import derive_state
from wilayah.selection.models import RegionDataset
from wilayah.selection.view_model import build_filter_view


def _view(dataset: RegionDataset, query: dict[str, str]):
    return build_filter_view(derive_state(dataset, query), query, dataset.provinces)


def test_initial_view(dataset: RegionDataset) -> None:
    view = _view(dataset, {})

    assert [(crumb.name, crumb.current) for crumb in view.breadcrumb] == [("Indonesia", True)]
    assert [(block.label, block.name) for block in view.hierarchy] == [("Wilayah", "Indonesia")]

    province, regency, district = view.selects
    assert province.disabled is False
    assert len(province.options) == 2
    assert province.placeholder == "Pilih Provinsi"
    assert regency.disabled is True
    assert regency.options == ()
    assert district.disabled is True


def test_full_chain_view(dataset: RegionDataset) -> None:
    view = _view(dataset, {"province": "1", "regency": "10", "district": "100"})

    assert [crumb.name for crumb in view.breadcrumb] == ["Indonesia", "Aceh", "Banda Aceh", "Baiturrahman"]
    assert [crumb.current for crumb in view.breadcrumb] == [False, False, False, True]
    assert [(block.label, block.name) for block in view.hierarchy] == [
        ("Provinsi", "Aceh"),
        ("Kota / Kabupaten", "Banda Aceh"),
        ("Kecamatan", "Baiturrahman"),
    ]
    assert [field.value for field in view.selects] == ["1", "10", "100"]
    assert all(not field.disabled for field in view.selects)


def test_stale_regency_value_is_echoed_but_district_disabled(dataset: RegionDataset) -> None:
    view = _view(dataset, {"province": "2", "regency": "10"})

    assert [crumb.name for crumb in view.breadcrumb] == ["Indonesia", "Bali"]
    assert [(block.label, block.name) for block in view.hierarchy] == [("Provinsi", "Bali")]
    regency = view.selects[1]
    assert regency.value == "10"
    assert [opt.id for opt in regency.options] == [20, 21]
    assert view.selects[2].disabled is True
