"""Configuration layer: load runtime settings from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _resolve_source(source_like: str) -> str:
    """Keep URLs verbatim; resolve relative paths against the project root."""
    if source_like.startswith(("http://", "https://")):
        return source_like
    candidate = Path(source_like)
    if candidate.is_absolute() or candidate.exists():
        return str(candidate)
    project_root = Path(__file__).resolve().parents[2]
    rooted = project_root / candidate
    if rooted.exists():
        return str(rooted)
    return str(candidate)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Immutable application settings used across API/runtime layers."""

    app_name: str = "Wilayah Filter API"
    app_version: str = "0.1.0"
    env: str = "dev"
    log_level: str = "INFO"
    cors_allow_origins: str = "http://localhost:5173,http://127.0.0.1:5173"
    region_data_source: str = "data/indonesia_regions.json"
    region_fetch_timeout_seconds: float = 10.0
    region_load_on_startup: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from process env with deterministic defaults."""
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            app_version=os.getenv("APP_VERSION", cls.app_version),
            env=os.getenv("APP_ENV", cls.env),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            cors_allow_origins=os.getenv("CORS_ALLOW_ORIGINS", cls.cors_allow_origins),
            region_data_source=_resolve_source(
                os.getenv("REGION_DATA_SOURCE", cls.region_data_source)
            ),
            region_fetch_timeout_seconds=float(
                os.getenv("REGION_FETCH_TIMEOUT_SECONDS", str(cls.region_fetch_timeout_seconds))
            ),
            region_load_on_startup=_env_bool(
                "REGION_LOAD_ON_STARTUP", cls.region_load_on_startup
            ),
        )

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]
