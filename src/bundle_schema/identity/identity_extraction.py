"""Schema identity extraction service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic_core import Url

from .identity_models import IdentityIssue, IdentityResolution, SchemaIdentity

ID_KEYWORD = "$id"

_LOGGER = logging.getLogger(__name__)


class InvalidIdentityUri(ValueError):
    """Raised when an `$id` string is not an absolute URI."""


class IdentityExtractor:
    """Derive the canonical and relative identifiers of schema root documents.

    Diagnostics go to the injected logger; nothing is raised for documents
    without a usable `$id`.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _LOGGER

    def resolve(self, document: Any) -> IdentityResolution:
        """Return the identity of `document`, or the reason it has none."""
        if not isinstance(document, Mapping) or ID_KEYWORD not in document:
            self._logger.debug("No $id value defined: %r", document)
            return IdentityResolution.unresolved(IdentityIssue.NO_IDENTITY_DECLARED)

        raw_id = document[ID_KEYWORD]
        if not isinstance(raw_id, str):
            self._logger.error("Unable to parse the $id value «%r» as a string.", raw_id)
            return IdentityResolution.unresolved(IdentityIssue.MALFORMED_IDENTITY_TYPE)

        try:
            parts = parse_absolute_uri(raw_id)
        except InvalidIdentityUri as exc:
            self._logger.error("Unable to parse $id value «%s» as URL: %s", raw_id, exc)
            return IdentityResolution.unresolved(IdentityIssue.MALFORMED_IDENTITY_URI)

        identity = SchemaIdentity(canonical=raw_id, relative=relative_identifier(parts.path or ""))
        self._logger.debug("Resolved identity %s -> %s", identity.canonical, identity.relative)
        return IdentityResolution.resolved(identity)

    def extract(self, document: Any) -> SchemaIdentity | None:
        """Return the identity of `document`, or None when it is not a schema root."""
        return self.resolve(document).identity


def resolve_identity(document: Any, *, logger: logging.Logger | None = None) -> IdentityResolution:
    """Resolve the identity of one document with a throwaway extractor."""
    return IdentityExtractor(logger).resolve(document)


def extract_identity(
    document: Any, *, logger: logging.Logger | None = None
) -> SchemaIdentity | None:
    """Return the identity of one document, or None."""
    return IdentityExtractor(logger).extract(document)


def parse_absolute_uri(value: str) -> Url:
    """Parse `value` as an absolute URL following the WHATWG URL standard.

    Raises:
      InvalidIdentityUri: If `value` is relative or otherwise not a URL.
    """
    try:
        return Url(value)
    except ValueError as exc:
        raise InvalidIdentityUri(str(exc)) from exc


def relative_identifier(path: str) -> str:
    """Strip exactly one leading `/` from a URI path."""
    return path.removeprefix("/")
