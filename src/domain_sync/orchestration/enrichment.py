"""Registration enrichment pipeline."""

from __future__ import annotations

import asyncio
import logging

from domain_sync.domain import (
    DnsSettings,
    DomainForward,
    EnrichedRegistration,
    GoogleDomainsDns,
    Record,
    Registration,
)
from domain_sync.registry import RegistryClient
from domain_sync.utils import gather_fail_fast


class EnrichmentPipeline:
    """Turns a project's registrations into enriched, transfer-ready records.

    A run lists registrations, keeps the active ones, fetches DNS records and
    forwarding rules for all of them concurrently, then unlocks each domain and
    retrieves its authorization code. The first failure aborts the run and no
    partial result is returned.
    """

    def __init__(
        self,
        client: RegistryClient,
        *,
        max_concurrency: int = 8,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._semaphore = asyncio.Semaphore(max(1, max_concurrency))
        self._logger = logger or logging.getLogger(__name__)

    async def run(self) -> list[EnrichedRegistration]:
        active = await self.list_active()
        enriched = await gather_fail_fast(self.enrich(registration) for registration in active)
        released = await gather_fail_fast(self.release(registration) for registration in enriched)
        self._logger.info("Prepared %d registrations for transfer", len(released))
        return released

    async def list_active(self) -> list[Registration]:
        registrations = await self._client.list_registrations()
        active: list[Registration] = []
        for registration in registrations:
            if registration.is_active:
                active.append(registration)
                continue
            self._logger.info(
                "Skipping %s in state %s",
                registration.domain_name,
                registration.state,
            )
        return active

    async def enrich(self, registration: Registration) -> Registration:
        """Return a copy of ``registration`` with DNS records and forwards populated."""

        settings = registration.dns_settings
        if settings is None:
            return registration

        records, forwards = await gather_fail_fast(
            [self._dns_records(registration), self._forwards(registration)]
        )
        dns = settings.google_domains_dns
        if dns is None and not forwards:
            return registration

        populated = (dns or GoogleDomainsDns()).model_copy(
            update={"records": records, "domain_forwards": forwards}
        )
        updated_settings: DnsSettings = settings.model_copy(
            update={"google_domains_dns": populated}
        )
        self._logger.debug(
            "Enriched %s with %d records and %d forwards",
            registration.domain_name,
            len(records),
            len(forwards),
        )
        return registration.model_copy(update={"dns_settings": updated_settings})

    async def release(self, registration: Registration) -> EnrichedRegistration:
        """Unlock ``registration`` and pair it with its authorization code."""

        domain_name = registration.domain_name
        # The registry refuses to hand out a code while the transfer lock is held
        async with self._semaphore:
            await self._client.unlock(domain_name)
        self._logger.info("Unlocked %s", domain_name)
        async with self._semaphore:
            code = await self._client.retrieve_auth_code(domain_name)
        return EnrichedRegistration(registration=registration, authorization_code=code)

    async def _dns_records(self, registration: Registration) -> tuple[Record, ...]:
        settings = registration.dns_settings
        if settings is None or settings.google_domains_dns is None:
            return ()
        async with self._semaphore:
            records = await self._client.retrieve_dns_records(registration.domain_name)
        return tuple(records)

    async def _forwards(self, registration: Registration) -> tuple[DomainForward, ...]:
        settings = registration.dns_settings
        if settings is None or not settings.google_domains_redirects_data_available:
            return ()
        async with self._semaphore:
            forwards = await self._client.retrieve_forwarding_config(registration.domain_name)
        return tuple(forwards)


__all__ = ["EnrichmentPipeline"]
