"""Custom exceptions for the registry integration."""

from __future__ import annotations


class DomainSyncError(RuntimeError):
    """Base class for failures that abort a sync run."""


class RemoteError(DomainSyncError):
    """Raised when the registry answers with anything other than HTTP 200."""

    def __init__(self, status_code: int, body: str, *, url: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.url = url
        target = f" from {url}" if url else ""
        super().__init__(f"HTTP {status_code}{target}: {body}")


class PayloadError(RemoteError):
    """Raised when a successful response does not match the expected shape."""


class CredentialError(DomainSyncError):
    """Raised when an access token cannot be obtained or refreshed."""


class TransportError(DomainSyncError):
    """Raised when a request fails below the HTTP status layer."""


__all__ = [
    "CredentialError",
    "DomainSyncError",
    "PayloadError",
    "RemoteError",
    "TransportError",
]
