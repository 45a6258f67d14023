"""Domain layer exports."""

from .base import DomainModel
from .enums import RegistrationState, TransferLockState
from .registration import (
    AuthorizationCode,
    ConfigureManagementSettingsRequest,
    DnsSettings,
    DomainForward,
    EnrichedRegistration,
    ForwardingConfig,
    GoogleDomainsDns,
    ManagementSettings,
    Record,
    RecordSetPage,
    Registration,
    RegistrationPage,
)

__all__ = [
    "AuthorizationCode",
    "ConfigureManagementSettingsRequest",
    "DnsSettings",
    "DomainForward",
    "DomainModel",
    "EnrichedRegistration",
    "ForwardingConfig",
    "GoogleDomainsDns",
    "ManagementSettings",
    "Record",
    "RecordSetPage",
    "Registration",
    "RegistrationPage",
    "RegistrationState",
    "TransferLockState",
]
