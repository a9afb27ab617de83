"""Schema identity entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IdentityIssue(str, Enum):
    """Reason a document did not yield a schema identity."""

    NO_IDENTITY_DECLARED = "no_identity_declared"
    MALFORMED_IDENTITY_TYPE = "malformed_identity_type"
    MALFORMED_IDENTITY_URI = "malformed_identity_uri"


@dataclass(frozen=True)
class SchemaIdentity:
    """Canonical `$id` of a schema root and the relative path derived from it."""

    canonical: str
    relative: str


@dataclass(frozen=True)
class IdentityResolution:
    """Result of resolving the identity of one document."""

    identity: SchemaIdentity | None
    issue: IdentityIssue | None

    @property
    def is_resolved(self) -> bool:
        """Return True when an identity was produced."""
        return self.identity is not None

    @staticmethod
    def resolved(identity: SchemaIdentity) -> IdentityResolution:
        return IdentityResolution(identity=identity, issue=None)

    @staticmethod
    def unresolved(issue: IdentityIssue) -> IdentityResolution:
        return IdentityResolution(identity=None, issue=issue)
