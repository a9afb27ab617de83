"""Schema identity exports."""

from .identity_extraction import (
    ID_KEYWORD,
    IdentityExtractor,
    InvalidIdentityUri,
    extract_identity,
    parse_absolute_uri,
    relative_identifier,
    resolve_identity,
)
from .identity_models import IdentityIssue, IdentityResolution, SchemaIdentity

__all__ = [
    "ID_KEYWORD",
    "IdentityExtractor",
    "IdentityIssue",
    "IdentityResolution",
    "InvalidIdentityUri",
    "SchemaIdentity",
    "extract_identity",
    "parse_absolute_uri",
    "relative_identifier",
    "resolve_identity",
]
