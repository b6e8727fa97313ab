"""Selection engine: query transitions for user changes at each level.

Every transition returns a complete replacement mapping (never a partial
update), or ``None`` when the change is ignored and nothing should be written.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from wilayah.selection.models import SelectionQuery

TransitionAction = Literal["set_province", "set_regency", "set_district", "reset"]


def _filled(value: str | None) -> bool:
    return value is not None and value != ""


def set_province(query: Mapping[str, str], new_id: str | None) -> SelectionQuery:
    # Regency and district are always dropped.
    if _filled(new_id):
        return {"province": str(new_id)}
    return {}


def set_regency(query: Mapping[str, str], new_id: str | None) -> SelectionQuery | None:
    province = query.get("province")
    if not _filled(province):
        return None
    if _filled(new_id):
        return {"province": province, "regency": str(new_id)}
    return {"province": province}


def set_district(query: Mapping[str, str], new_id: str | None) -> SelectionQuery | None:
    province = query.get("province")
    regency = query.get("regency")
    if not _filled(province) or not _filled(regency):
        return None
    if _filled(new_id):
        return {"province": province, "regency": regency, "district": str(new_id)}
    return {"province": province, "regency": regency}


def reset(query: Mapping[str, str] | None = None) -> SelectionQuery:
    return {}


def apply_transition(
    query: Mapping[str, str],
    action: str,
    value: str | None = None,
) -> SelectionQuery | None:
    """Dispatch a transition by action name."""
    if action == "set_province":
        return set_province(query, value)
    if action == "set_regency":
        return set_regency(query, value)
    if action == "set_district":
        return set_district(query, value)
    if action == "reset":
        return reset(query)
    raise ValueError(f"Unknown selection action: {action}")
