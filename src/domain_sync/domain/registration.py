"""Registration value objects and the wire envelopes that carry them."""

from __future__ import annotations

from pydantic import Field

from .base import DomainModel
from .enums import RegistrationState, TransferLockState


class Record(DomainModel):
    """A DNS resource record set as returned by the registry."""

    name: str
    type: str
    ttl: int = 0
    rrdata: frozenset[str] = Field(default_factory=frozenset)


class DomainForward(DomainModel):
    """A redirect from a subdomain alias to a target URI."""

    subdomain: str = ""
    target_uri: str
    redirect_type: str = ""


class GoogleDomainsDns(DomainModel):
    records: tuple[Record, ...] = ()
    domain_forwards: tuple[DomainForward, ...] = ()


class DnsSettings(DomainModel):
    google_domains_dns: GoogleDomainsDns | None = None
    google_domains_redirects_data_available: bool = False


class Registration(DomainModel):
    """A domain name managed by the registration service."""

    domain_name: str
    state: str = RegistrationState.STATE_UNSPECIFIED.value
    dns_settings: DnsSettings | None = None

    @property
    def is_active(self) -> bool:
        return self.state == RegistrationState.ACTIVE

    @property
    def records(self) -> tuple[Record, ...]:
        dns = self.dns_settings.google_domains_dns if self.dns_settings else None
        return dns.records if dns else ()

    @property
    def domain_forwards(self) -> tuple[DomainForward, ...]:
        dns = self.dns_settings.google_domains_dns if self.dns_settings else None
        return dns.domain_forwards if dns else ()


class AuthorizationCode(DomainModel):
    """Transfer secret for a domain; never persisted or logged."""

    domain_name: str
    code: str = Field(repr=False)


class EnrichedRegistration(DomainModel):
    """A fully enriched registration paired with its authorization code."""

    registration: Registration
    authorization_code: AuthorizationCode

    @property
    def domain_name(self) -> str:
        return self.registration.domain_name


class RegistrationPage(DomainModel):
    registrations: tuple[Registration, ...] = ()
    next_page_token: str | None = None


class RecordSetPage(DomainModel):
    rrset: tuple[Record, ...] = ()
    next_page_token: str | None = None


class ForwardingConfig(DomainModel):
    domain_forwardings: tuple[DomainForward, ...] = ()


class ManagementSettings(DomainModel):
    transfer_lock_state: TransferLockState


class ConfigureManagementSettingsRequest(DomainModel):
    """Body of the ``configureManagementSettings`` call used to unlock."""

    management_settings: ManagementSettings
    update_mask: str = "transferLockState"


__all__ = [
    "AuthorizationCode",
    "ConfigureManagementSettingsRequest",
    "DnsSettings",
    "DomainForward",
    "EnrichedRegistration",
    "ForwardingConfig",
    "GoogleDomainsDns",
    "ManagementSettings",
    "Record",
    "RecordSetPage",
    "Registration",
    "RegistrationPage",
]
