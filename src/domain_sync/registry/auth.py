"""Bearer credentials for registry requests."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import AsyncGenerator, Callable, Generator, Sequence
from typing import Any

import google.auth
import google.auth.exceptions
import google.auth.transport.requests
import httpx

from .exceptions import CredentialError
from .interfaces import TokenProvider

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"

logger = logging.getLogger(__name__)


class GoogleTokenProvider(TokenProvider):
    """Token provider backed by Google Application Default Credentials."""

    def __init__(
        self,
        credentials: Any | None = None,
        *,
        scopes: Sequence[str] = (CLOUD_PLATFORM_SCOPE,),
        request_factory: Callable[[], Any] = google.auth.transport.requests.Request,
    ) -> None:
        self._credentials = credentials
        self._scopes = tuple(scopes)
        self._request_factory = request_factory
        self._lock = threading.Lock()

    def current_access_token(self) -> str:
        with self._lock:
            credentials = self._load()
            if not credentials.valid:
                self._refresh(credentials)
            return str(credentials.token)

    def refreshed_access_token(self) -> str:
        with self._lock:
            credentials = self._load()
            self._refresh(credentials)
            return str(credentials.token)

    def _load(self) -> Any:
        if self._credentials is None:
            try:
                credentials, _ = google.auth.default(scopes=self._scopes)
            except google.auth.exceptions.DefaultCredentialsError as exc:
                msg = "Application Default Credentials are not available"
                raise CredentialError(msg) from exc
            self._credentials = credentials
        return self._credentials

    def _refresh(self, credentials: Any) -> None:
        logger.debug("Refreshing Google access token")
        try:
            credentials.refresh(self._request_factory())
        except google.auth.exceptions.GoogleAuthError as exc:
            msg = f"Unable to refresh Google credentials: {exc}"
            raise CredentialError(msg) from exc


class BearerTokenAuth(httpx.Auth):
    """Attach a bearer token to each request and refresh it once on HTTP 401."""

    def __init__(self, provider: TokenProvider) -> None:
        self._provider = provider

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._provider.current_access_token()}"
        response = yield request
        if response.status_code == httpx.codes.UNAUTHORIZED:
            token = self._provider.refreshed_access_token()
            request.headers["Authorization"] = f"Bearer {token}"
            yield request

    async def async_auth_flow(
        self,
        request: httpx.Request,
    ) -> AsyncGenerator[httpx.Request, httpx.Response]:
        # google-auth refreshes over blocking HTTP; keep it off the event loop
        loop = asyncio.get_running_loop()
        token = await loop.run_in_executor(None, self._provider.current_access_token)
        request.headers["Authorization"] = f"Bearer {token}"
        response = yield request
        if response.status_code == httpx.codes.UNAUTHORIZED:
            token = await loop.run_in_executor(None, self._provider.refreshed_access_token)
            request.headers["Authorization"] = f"Bearer {token}"
            yield request


__all__ = ["BearerTokenAuth", "CLOUD_PLATFORM_SCOPE", "GoogleTokenProvider"]
