"""Schema registry exports."""

from .registry_models import RegistrationOutcome, RegistrationStatus, RegistryEntry
from .schema_registry import SchemaRegistry

__all__ = [
    "RegistrationOutcome",
    "RegistrationStatus",
    "RegistryEntry",
    "SchemaRegistry",
]
