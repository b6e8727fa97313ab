"""Selection engine: derive the connected selection chain from a URL query."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

from wilayah.selection.models import DerivedState, District, Province, Regency, RegionDataset

T = TypeVar("T", Province, Regency, District)


def id_matches(entity_id: int, raw: str | None) -> bool:
    """Exact match of the canonical decimal id against an untrusted query value."""
    if raw is None:
        return False
    return str(entity_id) == raw


def _first_match(items: Iterable[T], raw: str | None) -> T | None:
    if not raw:
        return None
    for item in items:
        if id_matches(item.id, raw):
            return item
    return None


def regency_candidates(dataset: RegionDataset, province: Province | None) -> tuple[Regency, ...]:
    if province is None:
        return ()
    return tuple(row for row in dataset.regencies if row.province_id == province.id)


def district_candidates(dataset: RegionDataset, regency: Regency | None) -> tuple[District, ...]:
    if regency is None:
        return ()
    return tuple(row for row in dataset.districts if row.regency_id == regency.id)


def derive_state(dataset: RegionDataset, query: Mapping[str, str]) -> DerivedState:
    """Compute selections and candidate lists.

    Lower levels are looked up only among the candidates of the selected parent,
    so a stale or foreign regency/district id resolves to no selection instead of
    an inconsistent chain.
    """
    province = _first_match(dataset.provinces, query.get("province"))
    regency_options = regency_candidates(dataset, province)
    regency = _first_match(regency_options, query.get("regency"))
    district_options = district_candidates(dataset, regency)
    district = _first_match(district_options, query.get("district"))
    return DerivedState(
        selected_province=province,
        selected_regency=regency,
        selected_district=district,
        regency_options=regency_options,
        district_options=district_options,
    )
