"""Data layer: fetch and decode the static region dataset document."""

from __future__ import annotations

import asyncio
from http import client
from pathlib import Path
from urllib import error, request

from pydantic import BaseModel, ConfigDict, ValidationError

from wilayah.infra.observability.logger import get_logger
from wilayah.selection.models import District, Province, Regency, RegionDataset

logger = get_logger(__name__)


class RegionDataError(Exception):
    """Base error for region dataset availability problems."""


class FetchFailure(RegionDataError):
    """Dataset could not be fetched or decoded; terminal for one load attempt."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to fetch region data from {source}: {reason}")
        self.source = source
        self.reason = reason


class _ProvinceRow(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    id: int
    name: str


class _RegencyRow(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    id: int
    name: str
    province_id: int


class _DistrictRow(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    id: int
    name: str
    regency_id: int


class RegionDocument(BaseModel):
    """Expected shape of the dataset document."""

    model_config = ConfigDict(strict=True)

    provinces: list[_ProvinceRow]
    regencies: list[_RegencyRow]
    districts: list[_DistrictRow]

    def to_dataset(self) -> RegionDataset:
        return RegionDataset(
            provinces=tuple(Province(id=row.id, name=row.name) for row in self.provinces),
            regencies=tuple(
                Regency(id=row.id, name=row.name, province_id=row.province_id) for row in self.regencies
            ),
            districts=tuple(
                District(id=row.id, name=row.name, regency_id=row.regency_id) for row in self.districts
            ),
        )


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def decode_dataset(source: str, raw: bytes) -> RegionDataset:
    """Decode all-or-nothing; any shape problem fails the whole document."""
    try:
        document = RegionDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise FetchFailure(source, f"malformed payload ({exc.error_count()} errors)") from exc
    return document.to_dataset()


class RegionDatasetLoader:
    """Load the dataset from an HTTP(S) URL or a local JSON file. No retries."""

    def __init__(self, source: str, timeout_seconds: float = 10.0) -> None:
        self._source = source
        self._timeout_seconds = timeout_seconds

    @property
    def source(self) -> str:
        return self._source

    async def load(self) -> RegionDataset:
        raw = await asyncio.to_thread(self._read_bytes)
        dataset = decode_dataset(self._source, raw)
        logger.info("Region dataset decoded from %s: %s", self._source, dataset.counts())
        return dataset

    def _read_bytes(self) -> bytes:
        if _is_url(self._source):
            return self._fetch_url()
        path = Path(self._source)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FetchFailure(self._source, f"cannot read file ({exc.strerror or exc})") from exc

    def _fetch_url(self) -> bytes:
        req = request.Request(self._source, headers={"Accept": "application/json"}, method="GET")
        try:
            with request.urlopen(req, timeout=self._timeout_seconds) as resp:
                status = getattr(resp, "status", 200)
                if status < 200 or status >= 300:
                    raise FetchFailure(self._source, f"HTTP {status}")
                return resp.read()
        except error.HTTPError as exc:
            raise FetchFailure(self._source, f"HTTP {exc.code}") from exc
        except (error.URLError, OSError, client.HTTPException) as exc:
            # Covers timeouts and connections dropped mid-read.
            reason = getattr(exc, "reason", None) or exc.__class__.__name__
            raise FetchFailure(self._source, f"unreachable ({reason})") from exc
