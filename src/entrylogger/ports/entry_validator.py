"""Entry validator interface."""

from typing import Protocol

from entrylogger.core.entry import EntryRecord


class EntryValidator(Protocol):
    """Interface for validating a complete record before it is stored."""

    def validate(self, record: EntryRecord) -> str:
        """Return a confirmation message or raise DomainError."""
        ...
