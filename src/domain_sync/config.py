"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    project_id: str | None = None
    location: str = "global"
    api_base: str = "https://domains.googleapis.com/v1"
    request_timeout: float = 30.0
    max_concurrency: int = 8
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            project_id=os.getenv("PROJECT_ID") or None,
            location=os.getenv("DOMAIN_SYNC_LOCATION", cls.location),
            api_base=os.getenv("DOMAIN_SYNC_API_BASE", cls.api_base),
            request_timeout=_env_float("DOMAIN_SYNC_TIMEOUT", cls.request_timeout),
            max_concurrency=_env_int("DOMAIN_SYNC_MAX_CONCURRENCY", cls.max_concurrency),
            log_level=os.getenv("DOMAIN_SYNC_LOG_LEVEL", cls.log_level).upper(),
        )

    def with_overrides(
        self,
        *,
        project_id: str | None = None,
        location: str | None = None,
    ) -> AppSettings:
        """Return a copy with command-line overrides applied."""

        return replace(
            self,
            project_id=project_id or self.project_id,
            location=location or self.location,
        )


__all__ = ["AppSettings"]
