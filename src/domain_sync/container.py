"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from domain_sync.config import AppSettings
from domain_sync.orchestration import EnrichmentPipeline
from domain_sync.registry import DomainRegistryClient, GoogleTokenProvider, RegistryClient
from domain_sync.registry.interfaces import TokenProvider
from domain_sync.rendering import ConfigRenderer

logger = logging.getLogger(__name__)


class MissingProjectError(ValueError):
    """Raised when no project id is configured for a registry call."""


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates services that share one settings object."""

    settings: AppSettings
    token_provider: TokenProvider
    renderer: ConfigRenderer

    def registry_client(self, settings: AppSettings | None = None) -> DomainRegistryClient:
        """Build an unopened registry session; enter it with ``async with``."""

        resolved = settings or self.settings
        if not resolved.project_id:
            msg = "Please set the PROJECT_ID environment variable"
            raise MissingProjectError(msg)
        return DomainRegistryClient(
            resolved.project_id,
            self.token_provider,
            location=resolved.location,
            api_base=resolved.api_base,
            timeout=resolved.request_timeout,
        )

    def enrichment_pipeline(self, client: RegistryClient) -> EnrichmentPipeline:
        return EnrichmentPipeline(
            client,
            max_concurrency=self.settings.max_concurrency,
            logger=logger,
        )


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    logger.debug(
        "Building container for project %s (%s)",
        resolved_settings.project_id,
        resolved_settings.location,
    )
    return ServiceContainer(
        settings=resolved_settings,
        token_provider=GoogleTokenProvider(),
        renderer=ConfigRenderer(),
    )


__all__ = ["MissingProjectError", "ServiceContainer", "build_container"]
