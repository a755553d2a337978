"""Entry record model and its total ordering - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from functools import total_ordering

from .errors import EntryOrderError

DATE_FORMAT = "%d-%b-%y"

# Canonical rank order, not lexical order
TIME_BUCKETS: tuple[str, ...] = ("latenight", "morning", "afternoon", "night", "n/a")


def parse_entry_date(value: str) -> date:
    """Parse a dd-mon-yy string (month abbreviation is case-insensitive)."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_entry_date(value: date) -> str:
    """Format a date in the stored lowercase dd-mon-yy form."""
    return value.strftime(DATE_FORMAT).lower()


def time_bucket_rank(bucket: str) -> int:
    """Rank of a time bucket; unknown buckets sort before all known ones."""
    try:
        return TIME_BUCKETS.index(bucket)
    except ValueError:
        return -1


@total_ordering
@dataclass
class EntryMetadata:
    """Occurrence date, time bucket, insertion id and tag of an entry."""

    date: str
    time: str
    tag: str
    ins: str | None = None

    def sort_key(self) -> tuple:
        """
        Key implementing the metadata order.

        Precedence: calendar date, time bucket rank, insertion id (numeric,
        absent sorts last), tag. The raw date, time and ins strings come
        last so that only field-identical metadata share a key.

        Raises:
            EntryOrderError: If the date or ins cannot be interpreted.
        """
        missing = self.ins is None
        try:
            return (
                parse_entry_date(self.date),
                time_bucket_rank(self.time),
                missing,
                0 if missing else int(self.ins),
                self.tag,
                self.date,
                self.time,
                self.ins or "",
            )
        except ValueError as e:
            raise EntryOrderError(
                f"Cannot order entry with date:{self.date} ins:{self.ins}: {e}"
            ) from e

    def __lt__(self, other: "EntryMetadata") -> bool:
        if not isinstance(other, EntryMetadata):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@total_ordering
@dataclass
class EntryRecord:
    """A journal entry: metadata plus a short message."""

    metadata: EntryMetadata
    message: str

    @property
    def ins(self) -> str | None:
        return self.metadata.ins

    def sort_key(self) -> tuple:
        # Equal metadata tie-breaks on message
        return (*self.metadata.sort_key(), self.message)

    def __lt__(self, other: "EntryRecord") -> bool:
        if not isinstance(other, EntryRecord):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def compare_entries(a: EntryRecord, b: EntryRecord) -> int:
    """Three-way comparison: -1, 0 or 1."""
    ka, kb = a.sort_key(), b.sort_key()
    return (ka > kb) - (ka < kb)


def sort_entries(entries: list[EntryRecord]) -> list[EntryRecord]:
    """
    Sort entries into canonical order.

    Pure function - no I/O.
    """
    return sorted(entries, key=EntryRecord.sort_key)
