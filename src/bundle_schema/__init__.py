"""Schema identity extraction and registry for JSON Schema bundling."""

from .identity import IdentityExtractor, IdentityIssue, SchemaIdentity, extract_identity
from .registry import RegistrationOutcome, RegistrationStatus, RegistryEntry, SchemaRegistry

__all__ = [
    "IdentityExtractor",
    "IdentityIssue",
    "RegistrationOutcome",
    "RegistrationStatus",
    "RegistryEntry",
    "SchemaIdentity",
    "SchemaRegistry",
    "extract_identity",
]
