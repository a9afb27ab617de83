"""Read schema input files into parsed JSON values."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

_LOGGER = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class DocumentLoadError(Exception):
    """Raised when one input file cannot be read or parsed."""


@dataclass(frozen=True)
class LoadedDocument:
    """Parsed contents of one input file."""

    source_name: str
    document: Any


def load_document(path: Path | str) -> LoadedDocument:
    """Read and parse a single input file.

    Files ending in `.yaml` or `.yml` are parsed as YAML, everything else as JSON.

    Raises:
      DocumentLoadError: If the file is missing, unreadable, or not parseable.
    """
    source = Path(path)
    _LOGGER.debug("Parsing file «%s»", source)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read file «{source}»: {exc}") from exc

    try:
        if source.suffix.lower() in _YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DocumentLoadError(f"Failed to parse «{source}»: {exc}") from exc

    return LoadedDocument(source_name=str(source), document=document)


def load_documents(paths: Iterable[Path | str]) -> tuple[LoadedDocument, ...]:
    """Load every input in order, dropping the ones that fail with a diagnostic."""
    loaded: list[LoadedDocument] = []
    for path in paths:
        try:
            loaded.append(load_document(path))
        except DocumentLoadError as exc:
            _LOGGER.error("%s", exc)
    return tuple(loaded)
