"""Presentation state: breadcrumb, hierarchy blocks and select descriptors for the filter page."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from wilayah.selection.models import DerivedState, Region

ROOT_NAME = "Indonesia"
LEVEL_LABELS = ("Provinsi", "Kota / Kabupaten", "Kecamatan")


@dataclass(frozen=True)
class Crumb:
    name: str
    current: bool


@dataclass(frozen=True)
class Headline:
    label: str
    name: str


@dataclass(frozen=True)
class SelectField:
    name: str
    label: str
    placeholder: str
    value: str
    options: tuple[Region, ...]
    disabled: bool


@dataclass(frozen=True)
class FilterView:
    breadcrumb: tuple[Crumb, ...]
    hierarchy: tuple[Headline, ...]
    selects: tuple[SelectField, ...]


def _breadcrumb(state: DerivedState) -> tuple[Crumb, ...]:
    names = [ROOT_NAME] + [item.name for item in state.chain()]
    last = len(names) - 1
    return tuple(Crumb(name=name, current=idx == last) for idx, name in enumerate(names))


def _hierarchy(state: DerivedState) -> tuple[Headline, ...]:
    """One stacked block per selected level, or the country block when nothing is selected."""
    chain = state.chain()
    if not chain:
        return (Headline(label="Wilayah", name=ROOT_NAME),)
    return tuple(Headline(label=label, name=item.name) for label, item in zip(LEVEL_LABELS, chain))


def build_filter_view(
    state: DerivedState,
    query: Mapping[str, str],
    provinces: tuple[Region, ...],
) -> FilterView:
    """Build display state; select values echo the raw query, even when stale."""
    selects = (
        SelectField(
            name="province",
            label="Provinsi",
            placeholder="Pilih Provinsi",
            value=query.get("province") or "",
            options=provinces,
            disabled=False,
        ),
        SelectField(
            name="regency",
            label="Kota/Kabupaten",
            placeholder="Pilih Kota/Kabupaten",
            value=query.get("regency") or "",
            options=state.regency_options,
            disabled=state.selected_province is None,
        ),
        SelectField(
            name="district",
            label="Kecamatan",
            placeholder="Pilih Kecamatan",
            value=query.get("district") or "",
            options=state.district_options,
            disabled=state.selected_regency is None,
        ),
    )
    return FilterView(breadcrumb=_breadcrumb(state), hierarchy=_hierarchy(state), selects=selects)
