"""Enumerations mirroring Cloud Domains API values."""

from __future__ import annotations

from enum import StrEnum


class RegistrationState(StrEnum):
    """Lifecycle states reported for a registration."""

    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    REGISTRATION_PENDING = "REGISTRATION_PENDING"
    REGISTRATION_FAILED = "REGISTRATION_FAILED"
    TRANSFER_PENDING = "TRANSFER_PENDING"
    TRANSFER_FAILED = "TRANSFER_FAILED"
    IMPORT_PENDING = "IMPORT_PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    EXPORTED = "EXPORTED"
    EXPIRED = "EXPIRED"


class TransferLockState(StrEnum):
    """Transfer lock values accepted by ``configureManagementSettings``."""

    TRANSFER_LOCK_STATE_UNSPECIFIED = "TRANSFER_LOCK_STATE_UNSPECIFIED"
    UNLOCKED = "UNLOCKED"
    LOCKED = "LOCKED"
