"""Protocols for credential sources and registry clients."""

from __future__ import annotations

from typing import Protocol

from domain_sync.domain import AuthorizationCode, DomainForward, Record, Registration


class TokenProvider(Protocol):
    """Source of short-lived bearer tokens.

    Both calls may block and may raise ``CredentialError``.
    """

    def current_access_token(self) -> str:
        """Return a valid access token, refreshing it first if it has expired."""

    def refreshed_access_token(self) -> str:
        """Force a refresh and return the new access token."""


class RegistryClient(Protocol):
    """Contract implemented by registry clients and their test doubles."""

    async def list_registrations(self) -> list[Registration]:
        """Return every registration under the configured project."""

    async def unlock(self, domain_name: str) -> None:
        """Clear the transfer lock of a domain."""

    async def retrieve_auth_code(self, domain_name: str) -> AuthorizationCode:
        """Return the transfer authorization code of an unlocked domain."""

    async def retrieve_dns_records(self, domain_name: str) -> list[Record]:
        """Return the DNS records hosted for a domain."""

    async def retrieve_forwarding_config(self, domain_name: str) -> list[DomainForward]:
        """Return the redirect rules configured for a domain."""


__all__ = ["RegistryClient", "TokenProvider"]
