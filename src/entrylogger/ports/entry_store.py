"""Entry storage interface."""

from typing import Protocol

from entrylogger.core.entry import EntryRecord


class EntryStore(Protocol):
    """Interface for reading and writing entries on any backend."""

    def read_entries(self) -> list[EntryRecord]:
        """Read all stored entries in storage order."""
        ...

    def write_entry(self, entry: EntryRecord) -> EntryRecord:
        """Insert an entry, keeping storage sorted. Returns the entry."""
        ...
