"""In-memory entry storage adapter."""

from entrylogger.core.entry import EntryRecord, sort_entries


class InMemoryEntryStore:
    """
    In-process entry storage.

    Implements EntryStore protocol with the same sorted-insert semantics as
    the file store, without touching disk.
    """

    def __init__(self, entries: list[EntryRecord] | None = None):
        self.entries: list[EntryRecord] = list(entries or [])

    def read_entries(self) -> list[EntryRecord]:
        return list(self.entries)

    def write_entry(self, entry: EntryRecord) -> EntryRecord:
        self.entries = sort_entries([*self.entries, entry])
        return entry
