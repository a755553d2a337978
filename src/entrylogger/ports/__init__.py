"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import EntryStore
from .entry_validator import EntryValidator

__all__ = [
    "EntryStore",
    "EntryValidator",
]
