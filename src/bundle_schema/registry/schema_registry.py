"""In-memory schema registry keyed by relative identifier."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from bundle_schema.identity.identity_extraction import IdentityExtractor
from bundle_schema.identity.identity_models import IdentityIssue

from .registry_models import RegistrationOutcome, RegistryEntry

_LOGGER = logging.getLogger(__name__)


class SchemaRegistry:
    """Registry of schema root documents addressable by relative identifier.

    Documents without a usable `$id` are dropped with a diagnostic instead of
    raising. A document whose relative identifier is already present replaces
    the stored entry.
    """

    def __init__(
        self,
        *,
        extractor: IdentityExtractor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or _LOGGER
        self._extractor = extractor or IdentityExtractor(self._logger)
        self._entries: dict[str, RegistryEntry] = {}
        self._lock = threading.Lock()

    def register(self, document: Any) -> RegistrationOutcome:
        """Store `document` under its relative identifier and report what happened."""
        resolution = self._extractor.resolve(document)
        if resolution.identity is None:
            self._logger.error("Unable to register a schema without a valid `$id` property.")
            return RegistrationOutcome.dropped(
                resolution.issue or IdentityIssue.NO_IDENTITY_DECLARED
            )

        identity = resolution.identity
        self._logger.debug("Using ID %s (relative %s)", identity.canonical, identity.relative)
        with self._lock:
            replaced = identity.relative in self._entries
            self._entries[identity.relative] = RegistryEntry(identity=identity, document=document)
        if replaced:
            self._logger.debug("Replaced schema previously registered at %s", identity.relative)
        return RegistrationOutcome.stored(identity, replaced=replaced)

    def register_all(self, documents: Iterable[Any]) -> tuple[RegistrationOutcome, ...]:
        """Register documents in order and return one outcome per document."""
        return tuple(self.register(document) for document in documents)

    def lookup(self, relative_id: str) -> Any | None:
        """Return the stored document for `relative_id`, or None."""
        entry = self.entry(relative_id)
        return entry.document if entry is not None else None

    def entry(self, relative_id: str) -> RegistryEntry | None:
        """Return the stored entry for `relative_id`, or None."""
        with self._lock:
            return self._entries.get(relative_id)

    def relative_ids(self) -> tuple[str, ...]:
        """Return stored relative identifiers in sorted order."""
        with self._lock:
            return tuple(sorted(self._entries))

    def size(self) -> int:
        """Return the number of stored entries."""
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, relative_id: object) -> bool:
        with self._lock:
            return relative_id in self._entries
