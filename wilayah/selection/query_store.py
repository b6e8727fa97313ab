"""URL-state layer: query stores owning the selection mapping."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from threading import Lock
from typing import Protocol
from urllib import parse

from wilayah.infra.observability.logger import get_logger
from wilayah.selection.models import QUERY_KEYS, SelectionQuery

logger = get_logger(__name__)

QueryListener = Callable[[SelectionQuery], None]


def parse_query_string(text: str) -> SelectionQuery:
    """Parse a URL query string keeping the first value of each key."""
    result: SelectionQuery = {}
    for key, value in parse.parse_qsl(text.lstrip("?"), keep_blank_values=True):
        result.setdefault(key, value)
    return result


def encode_query(mapping: Mapping[str, str]) -> str:
    """Encode a mapping with hierarchy keys first so shared URLs read naturally."""
    ordered = [(key, mapping[key]) for key in QUERY_KEYS if key in mapping]
    ordered.extend((key, value) for key, value in mapping.items() if key not in QUERY_KEYS)
    return parse.urlencode(ordered)


class QueryStore(Protocol):
    def get(self) -> SelectionQuery: ...

    def replace(self, mapping: Mapping[str, str]) -> None: ...

    def subscribe(self, listener: QueryListener) -> Callable[[], None]: ...


class InMemoryQueryStore:
    """Thread-safe holder of one query mapping with change notification."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._lock = Lock()
        self._mapping: SelectionQuery = dict(initial or {})
        self._listeners: list[QueryListener] = []

    def get(self) -> SelectionQuery:
        with self._lock:
            return dict(self._mapping)

    def replace(self, mapping: Mapping[str, str]) -> None:
        snapshot = {str(key): str(value) for key, value in mapping.items()}
        with self._lock:
            self._mapping = snapshot
            listeners = list(self._listeners)
        for listener in listeners:
            listener(dict(snapshot))

    def subscribe(self, listener: QueryListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe


class UrlQueryStore(InMemoryQueryStore):
    """Query store backed by a shareable URL; replacing rewrites its query string."""

    def __init__(self, url: str) -> None:
        parts = parse.urlsplit(url)
        super().__init__(parse_query_string(parts.query))
        self._base = parts._replace(query="", fragment="")
        self._fragment = parts.fragment

    @property
    def url(self) -> str:
        return parse.urlunsplit(self._base._replace(query=encode_query(self.get()), fragment=self._fragment))

    def replace(self, mapping: Mapping[str, str]) -> None:
        super().replace(mapping)
        logger.debug("URL state replaced: %s", self.url)
