"""Filter session: binds a loaded dataset to a query store and keeps derived state fresh."""

from __future__ import annotations

from wilayah.selection.derivation import derive_state
from wilayah.selection.models import DerivedState, RegionDataset, SelectionQuery
from wilayah.selection.query_store import QueryStore
from wilayah.selection.transitions import apply_transition


class FilterSession:
    """Recompute derived state after every replacement of the query mapping."""

    def __init__(self, dataset: RegionDataset, store: QueryStore) -> None:
        self._dataset = dataset
        self._store = store
        self._state = derive_state(dataset, store.get())
        self._unsubscribe = store.subscribe(self._on_query_replaced)

    @property
    def state(self) -> DerivedState:
        return self._state

    @property
    def query(self) -> SelectionQuery:
        return self._store.get()

    def set_province(self, new_id: str | None) -> bool:
        return self._dispatch("set_province", new_id)

    def set_regency(self, new_id: str | None) -> bool:
        return self._dispatch("set_regency", new_id)

    def set_district(self, new_id: str | None) -> bool:
        return self._dispatch("set_district", new_id)

    def reset(self) -> bool:
        return self._dispatch("reset", None)

    def close(self) -> None:
        self._unsubscribe()

    def _dispatch(self, action: str, value: str | None) -> bool:
        """Issue exactly one replace; return False when the change was ignored."""
        next_query = apply_transition(self._store.get(), action, value)
        if next_query is None:
            return False
        self._store.replace(next_query)
        return True

    def _on_query_replaced(self, query: SelectionQuery) -> None:
        self._state = derive_state(self._dataset, query)
