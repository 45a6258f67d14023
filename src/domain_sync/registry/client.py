"""Cloud Domains registry client."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from domain_sync.domain import (
    AuthorizationCode,
    ConfigureManagementSettingsRequest,
    DomainForward,
    DomainModel,
    ForwardingConfig,
    ManagementSettings,
    Record,
    RecordSetPage,
    Registration,
    RegistrationPage,
    TransferLockState,
)

from .auth import BearerTokenAuth
from .exceptions import DomainSyncError, PayloadError, RemoteError, TransportError
from .interfaces import RegistryClient, TokenProvider

ModelT = TypeVar("ModelT", bound=DomainModel)

logger = logging.getLogger(__name__)


class DomainRegistryClient(RegistryClient):
    """Authenticated session issuing registry calls for a single project.

    Use as an async context manager. A client created by the session is closed
    when the scope exits; an injected ``httpx.AsyncClient`` stays open for its
    owner to close.
    """

    API_BASE = "https://domains.googleapis.com/v1"

    def __init__(
        self,
        project_id: str,
        token_provider: TokenProvider,
        *,
        location: str = "global",
        api_base: str = API_BASE,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not project_id:
            msg = "project_id is required"
            raise ValueError(msg)
        self._parent = f"{api_base.rstrip('/')}/projects/{project_id}/locations/{location}"
        self._auth = BearerTokenAuth(token_provider)
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    async def __aenter__(self) -> DomainRegistryClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            client, self._client = self._client, None
            await client.aclose()

    async def list_registrations(self) -> list[Registration]:
        registrations: list[Registration] = []
        async for page in self._paginate(f"{self._parent}/registrations", RegistrationPage):
            registrations.extend(page.registrations)
        return registrations

    async def unlock(self, domain_name: str) -> None:
        body = ConfigureManagementSettingsRequest(
            management_settings=ManagementSettings(
                transfer_lock_state=TransferLockState.UNLOCKED,
            ),
        )
        # Responds with a long-running operation we do not need to inspect
        await self._request(
            "POST",
            self._registration_url(domain_name, "configureManagementSettings"),
            json=body.model_dump(mode="json", by_alias=True),
        )

    async def retrieve_auth_code(self, domain_name: str) -> AuthorizationCode:
        url = self._registration_url(domain_name, "retrieveAuthorizationCode")
        response = await self._request("GET", url)
        payload = self._decode(response, _AuthorizationCodePayload)
        return AuthorizationCode(domain_name=domain_name, code=payload.code)

    async def retrieve_dns_records(self, domain_name: str) -> list[Record]:
        url = self._registration_url(domain_name, "retrieveGoogleDomainsDnsRecords")
        records: list[Record] = []
        async for page in self._paginate(url, RecordSetPage):
            records.extend(page.rrset)
        return records

    async def retrieve_forwarding_config(self, domain_name: str) -> list[DomainForward]:
        url = self._registration_url(domain_name, "retrieveGoogleDomainsForwardingConfig")
        response = await self._request("GET", url)
        return list(self._decode(response, ForwardingConfig).domain_forwardings)

    def _registration_url(self, domain_name: str, method: str) -> str:
        return f"{self._parent}/registrations/{domain_name}:{method}"

    async def _paginate(self, url: str, model: type[ModelT]) -> AsyncIterator[ModelT]:
        params: dict[str, str] = {}
        while True:
            response = await self._request("GET", url, params=params or None)
            page = self._decode(response, model)
            yield page
            token = getattr(page, "next_page_token", None)
            if not token:
                return
            params = {"pageToken": token}

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        if self._client is None:
            msg = "DomainRegistryClient must be used inside 'async with'"
            raise DomainSyncError(msg)
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json,
                auth=self._auth,
            )
        except httpx.HTTPError as exc:
            msg = f"{method} {url} failed: {exc}"
            raise TransportError(msg) from exc
        logger.debug("%s %s -> %s", method, url, response.status_code)
        if response.status_code != httpx.codes.OK:
            raise RemoteError(response.status_code, response.text, url=url)
        return response

    def _decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        content = response.content or b"{}"
        try:
            return model.model_validate_json(content)
        except ValidationError as exc:
            raise PayloadError(response.status_code, response.text, url=str(response.url)) from exc


class _AuthorizationCodePayload(DomainModel):
    code: str


__all__ = ["DomainRegistryClient"]
