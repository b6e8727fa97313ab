"""Protocol layer: request/response DTOs shared by the HTTP API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from wilayah.selection.models import District, Province, Regency, RegionDataset

TransitionActionType = Literal["set_province", "set_regency", "set_district", "reset"]


class ProvinceDto(BaseModel):
    id: int
    name: str


class RegencyDto(BaseModel):
    id: int
    name: str
    province_id: int


class DistrictDto(BaseModel):
    id: int
    name: str
    regency_id: int


class RegionOptionDto(BaseModel):
    """One `<option>` entry of a select."""

    id: int
    name: str


class RegionDatasetDto(BaseModel):
    """Whole dataset document, unfiltered."""

    provinces: list[ProvinceDto] = Field(default_factory=list)
    regencies: list[RegencyDto] = Field(default_factory=list)
    districts: list[DistrictDto] = Field(default_factory=list)


class DerivedStateDto(BaseModel):
    """Selection chain and candidate lists for one query."""

    selected_province: ProvinceDto | None = None
    selected_regency: RegencyDto | None = None
    selected_district: DistrictDto | None = None
    regency_options: list[RegencyDto] = Field(default_factory=list)
    district_options: list[DistrictDto] = Field(default_factory=list)
    depth: int = 0


class CrumbDto(BaseModel):
    name: str
    current: bool


class HeadlineDto(BaseModel):
    label: str
    name: str


class SelectFieldDto(BaseModel):
    name: str
    label: str
    placeholder: str
    value: str
    disabled: bool
    options: list[RegionOptionDto] = Field(default_factory=list)


class FilterViewDto(BaseModel):
    breadcrumb: list[CrumbDto]
    hierarchy: list[HeadlineDto]
    selects: list[SelectFieldDto]


class FilterStateResponse(BaseModel):
    """Everything a filter page needs to render for one URL query."""

    query: dict[str, str]
    share_query: str
    state: DerivedStateDto
    view: FilterViewDto


class TransitionRequest(BaseModel):
    """User change at one level, applied to the current URL query."""

    query: dict[str, str] = Field(default_factory=dict)
    action: TransitionActionType
    value: str | None = None


class TransitionResponse(BaseModel):
    applied: bool
    query: dict[str, str]
    share_query: str
    state: DerivedStateDto


def province_dto(item: Province) -> ProvinceDto:
    return ProvinceDto(id=item.id, name=item.name)


def regency_dto(item: Regency) -> RegencyDto:
    return RegencyDto(id=item.id, name=item.name, province_id=item.province_id)


def district_dto(item: District) -> DistrictDto:
    return DistrictDto(id=item.id, name=item.name, regency_id=item.regency_id)


def dataset_dto(dataset: RegionDataset) -> RegionDatasetDto:
    return RegionDatasetDto(
        provinces=[province_dto(row) for row in dataset.provinces],
        regencies=[regency_dto(row) for row in dataset.regencies],
        districts=[district_dto(row) for row in dataset.districts],
    )
