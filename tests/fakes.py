"""In-memory doubles shared by the pipeline and CLI tests."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from types import TracebackType

from domain_sync.domain import (
    AuthorizationCode,
    DnsSettings,
    DomainForward,
    GoogleDomainsDns,
    Record,
    Registration,
)
from domain_sync.registry import RemoteError


class StaticTokens:
    def __init__(self) -> None:
        self.current = "token-1"
        self.refreshes = 0

    def current_access_token(self) -> str:
        return self.current

    def refreshed_access_token(self) -> str:
        self.refreshes += 1
        self.current = f"token-{self.refreshes + 1}"
        return self.current


class FakeRegistryClient:
    """Records every call as an ``(operation, domain)`` event."""

    def __init__(
        self,
        registrations: Iterable[Registration],
        *,
        records: Mapping[str, list[Record]] | None = None,
        forwards: Mapping[str, list[DomainForward]] | None = None,
        codes: Mapping[str, str] | None = None,
        delays: Mapping[str, float] | None = None,
        fail_dns: Iterable[str] = (),
    ) -> None:
        self.registrations = list(registrations)
        self.records = dict(records or {})
        self.forwards = dict(forwards or {})
        self.codes = dict(codes or {})
        self.delays = dict(delays or {})
        self.fail_dns = set(fail_dns)
        self.events: list[tuple[str, str]] = []

    async def list_registrations(self) -> list[Registration]:
        self.events.append(("list", ""))
        return list(self.registrations)

    async def unlock(self, domain_name: str) -> None:
        await asyncio.sleep(self.delays.get(domain_name, 0))
        self.events.append(("unlock", domain_name))

    async def retrieve_auth_code(self, domain_name: str) -> AuthorizationCode:
        self.events.append(("auth_code", domain_name))
        return AuthorizationCode(
            domain_name=domain_name,
            code=self.codes.get(domain_name, f"CODE-{domain_name}"),
        )

    async def retrieve_dns_records(self, domain_name: str) -> list[Record]:
        await asyncio.sleep(self.delays.get(domain_name, 0))
        if domain_name in self.fail_dns:
            raise RemoteError(500, "backend error")
        self.events.append(("dns", domain_name))
        return list(self.records.get(domain_name, []))

    async def retrieve_forwarding_config(self, domain_name: str) -> list[DomainForward]:
        await asyncio.sleep(self.delays.get(domain_name, 0))
        self.events.append(("forwarding", domain_name))
        return list(self.forwards.get(domain_name, []))

    def calls_for(self, domain_name: str) -> list[str]:
        return [operation for operation, domain in self.events if domain == domain_name]


class FakeSession:
    """Async context manager handing out a fake client, like a registry session."""

    def __init__(self, client: FakeRegistryClient) -> None:
        self.client = client
        self.closed = False

    async def __aenter__(self) -> FakeRegistryClient:
        return self.client

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.closed = True


def active(
    domain_name: str,
    *,
    dns: bool = False,
    forwarding: bool = False,
    state: str = "ACTIVE",
) -> Registration:
    dns_settings = None
    if dns or forwarding:
        dns_settings = DnsSettings(
            google_domains_dns=GoogleDomainsDns() if dns else None,
            google_domains_redirects_data_available=forwarding,
        )
    return Registration(domain_name=domain_name, state=state, dns_settings=dns_settings)


B_RECORD = Record(name="b.com", type="A", ttl=300, rrdata=frozenset({"1.2.3.4"}))
B_FORWARD = DomainForward(subdomain="www", target_uri="https://b.com", redirect_type="PERMANENT")


def scenario_client() -> FakeRegistryClient:
    """``a.com`` without DNS settings and ``b.com`` with one record and one forward."""

    return FakeRegistryClient(
        [active("a.com"), active("b.com", dns=True, forwarding=True)],
        records={"b.com": [B_RECORD]},
        forwards={"b.com": [B_FORWARD]},
        codes={"a.com": "CODE-A", "b.com": "CODE-B"},
    )
