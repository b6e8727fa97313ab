"""HTTP API layer: filter page state derived from URL query, and level transitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from wilayah.api.deps import get_dataset
from wilayah.infra.observability.logger import get_logger
from wilayah.protocol.messages import (
    CrumbDto,
    DerivedStateDto,
    FilterStateResponse,
    FilterViewDto,
    HeadlineDto,
    RegionOptionDto,
    SelectFieldDto,
    TransitionRequest,
    TransitionResponse,
    district_dto,
    province_dto,
    regency_dto,
)
from wilayah.selection.derivation import derive_state
from wilayah.selection.models import QUERY_KEYS, DerivedState, RegionDataset
from wilayah.selection.query_store import encode_query, parse_query_string
from wilayah.selection.transitions import apply_transition
from wilayah.selection.view_model import FilterView, build_filter_view

router = APIRouter(prefix="/api/v1/filter", tags=["filter"])
logger = get_logger(__name__)


def _state_dto(state: DerivedState) -> DerivedStateDto:
    return DerivedStateDto(
        selected_province=province_dto(state.selected_province) if state.selected_province else None,
        selected_regency=regency_dto(state.selected_regency) if state.selected_regency else None,
        selected_district=district_dto(state.selected_district) if state.selected_district else None,
        regency_options=[regency_dto(row) for row in state.regency_options],
        district_options=[district_dto(row) for row in state.district_options],
        depth=state.depth,
    )


def _view_dto(view: FilterView) -> FilterViewDto:
    return FilterViewDto(
        breadcrumb=[CrumbDto(name=crumb.name, current=crumb.current) for crumb in view.breadcrumb],
        hierarchy=[HeadlineDto(label=block.label, name=block.name) for block in view.hierarchy],
        selects=[
            SelectFieldDto(
                name=field.name,
                label=field.label,
                placeholder=field.placeholder,
                value=field.value,
                disabled=field.disabled,
                options=[RegionOptionDto(id=opt.id, name=opt.name) for opt in field.options],
            )
            for field in view.selects
        ],
    )


@router.get("", response_model=FilterStateResponse)
def get_filter_state(
    request: Request,
    dataset: RegionDataset = Depends(get_dataset),
) -> FilterStateResponse:
    # First value per key, same reading as a shared URL restored by UrlQueryStore.
    raw = parse_query_string(request.url.query)
    query = {key: raw[key] for key in QUERY_KEYS if key in raw}
    state = derive_state(dataset, query)
    view = build_filter_view(state, query, dataset.provinces)
    return FilterStateResponse(
        query=query,
        share_query=encode_query(query),
        state=_state_dto(state),
        view=_view_dto(view),
    )


@router.post("/transitions", response_model=TransitionResponse)
def apply_filter_transition(
    payload: TransitionRequest,
    dataset: RegionDataset = Depends(get_dataset),
) -> TransitionResponse:
    next_query = apply_transition(payload.query, payload.action, payload.value)
    applied = next_query is not None
    if next_query is None:
        logger.debug("Ignored %s: parent level not set in %s", payload.action, payload.query)
        next_query = dict(payload.query)
    state = derive_state(dataset, next_query)
    return TransitionResponse(
        applied=applied,
        query=next_query,
        share_query=encode_query(next_query),
        state=_state_dto(state),
    )
