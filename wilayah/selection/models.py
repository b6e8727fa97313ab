"""Domain layer: immutable region entities and derived selection state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

SelectionQuery = dict[str, str]

QUERY_KEYS: tuple[str, ...] = ("province", "regency", "district")


@dataclass(frozen=True)
class Province:
    id: int
    name: str


@dataclass(frozen=True)
class Regency:
    id: int
    name: str
    province_id: int


@dataclass(frozen=True)
class District:
    id: int
    name: str
    regency_id: int


Region = Union[Province, Regency, District]


@dataclass(frozen=True)
class RegionDataset:
    """Full province/regency/district collections, read-only after load."""

    provinces: tuple[Province, ...] = ()
    regencies: tuple[Regency, ...] = ()
    districts: tuple[District, ...] = ()

    def counts(self) -> dict[str, int]:
        return {
            "provinces": len(self.provinces),
            "regencies": len(self.regencies),
            "districts": len(self.districts),
        }


@dataclass(frozen=True)
class DerivedState:
    """Selection chain and candidate lists computed from one query snapshot."""

    selected_province: Province | None = None
    selected_regency: Regency | None = None
    selected_district: District | None = None
    regency_options: tuple[Regency, ...] = field(default_factory=tuple)
    district_options: tuple[District, ...] = field(default_factory=tuple)

    @property
    def depth(self) -> int:
        """Length of the populated chain, 0..3."""
        if self.selected_province is None:
            return 0
        if self.selected_regency is None:
            return 1
        if self.selected_district is None:
            return 2
        return 3

    def chain(self) -> list[Region]:
        chain: list[Region] = []
        for item in (self.selected_province, self.selected_regency, self.selected_district):
            if item is None:
                break
            chain.append(item)
        return chain

    def to_query(self) -> SelectionQuery:
        """Encode the selected chain back into URL query form."""
        return {key: str(item.id) for key, item in zip(QUERY_KEYS, self.chain())}
