"""Registry subsystem exports."""

from .auth import BearerTokenAuth, GoogleTokenProvider
from .client import DomainRegistryClient
from .exceptions import (
    CredentialError,
    DomainSyncError,
    PayloadError,
    RemoteError,
    TransportError,
)
from .interfaces import RegistryClient, TokenProvider

__all__ = [
    "BearerTokenAuth",
    "CredentialError",
    "DomainRegistryClient",
    "DomainSyncError",
    "GoogleTokenProvider",
    "PayloadError",
    "RegistryClient",
    "RemoteError",
    "TokenProvider",
    "TransportError",
]
