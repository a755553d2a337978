"""Summary digest over a set of entries - pure, no I/O."""

from dataclasses import dataclass, field
from datetime import date

from .entry import EntryRecord, parse_entry_date, sort_entries


@dataclass
class EntryDigest:
    """Counts and most recent entry for a journal."""

    qty: int
    tags: list[str] = field(default_factory=list)
    entries_today: int = 0
    last_entry_date: str | None = None
    last_entry: EntryRecord | None = None


def build_digest(entries: list[EntryRecord], today: date | None = None) -> EntryDigest:
    """
    Summarize entries.

    The last entry is the greatest in canonical order, so stamp-less entries
    on the latest date and bucket win over stamped ones.
    """
    today = today or date.today()
    ordered = sort_entries(entries)
    last = ordered[-1] if ordered else None
    return EntryDigest(
        qty=len(ordered),
        tags=sorted({e.metadata.tag for e in ordered}),
        entries_today=sum(
            1 for e in ordered if parse_entry_date(e.metadata.date) == today
        ),
        last_entry_date=last.metadata.date if last else None,
        last_entry=last,
    )
