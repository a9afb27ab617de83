"""Schema registry entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from bundle_schema.identity.identity_models import IdentityIssue, SchemaIdentity


class RegistrationStatus(str, Enum):
    """Schema registration outcome status."""

    STORED = "stored"
    DROPPED = "dropped"


@dataclass(frozen=True)
class RegistryEntry:
    """One stored schema root document."""

    identity: SchemaIdentity
    document: Any


@dataclass(frozen=True)
class RegistrationOutcome:
    """Outcome of handing one document to the registry."""

    status: RegistrationStatus
    identity: SchemaIdentity | None
    issue: IdentityIssue | None
    replaced: bool = False

    @property
    def is_stored(self) -> bool:
        return self.status is RegistrationStatus.STORED

    @staticmethod
    def stored(identity: SchemaIdentity, *, replaced: bool) -> RegistrationOutcome:
        return RegistrationOutcome(
            status=RegistrationStatus.STORED,
            identity=identity,
            issue=None,
            replaced=replaced,
        )

    @staticmethod
    def dropped(issue: IdentityIssue) -> RegistrationOutcome:
        return RegistrationOutcome(
            status=RegistrationStatus.DROPPED,
            identity=None,
            issue=issue,
        )
