"""Entry service - the operations exposed to the CLI shell.

Validates incoming records, stamps their insertion id and delegates storage
to an injected EntryStore.
"""

import logging
from datetime import date, datetime
from typing import Callable

from .core.digest import EntryDigest, build_digest
from .core.entry import EntryRecord, sort_entries
from .core.errors import DomainError
from .core.validation import RecordValidator, normalize_date
from .ports.entry_store import EntryStore
from .ports.entry_validator import EntryValidator

logger = logging.getLogger(__name__)


def make_ins(now: datetime) -> str:
    """13-digit millisecond epoch timestamp."""
    return str(int(now.timestamp() * 1000))


class EntryService:
    """Entry operations over an injected store and validator."""

    def __init__(
        self,
        store: EntryStore,
        validator: EntryValidator | None = None,
        strict: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.validator = validator or RecordValidator()
        self.strict = strict
        self.clock = clock

    def get_entries(self) -> list[EntryRecord]:
        """All stored entries in canonical order."""
        return sort_entries(self.store.read_entries())

    def post_entry(self, record: EntryRecord) -> EntryRecord:
        """
        Stamp, normalize, validate and store a record.

        A parseable date is stored in its lowercase dd-mon-yy form.

        Without strict mode a validation failure is logged and the record is
        still written. In strict mode the DomainError is raised before any
        write.
        """
        record.metadata.ins = make_ins(self.clock())
        record.metadata.date = normalize_date(record.metadata.date)
        try:
            confirmation = self.validator.validate(record)
            logger.debug(confirmation)
        except DomainError as e:
            if self.strict:
                raise
            logger.warning(f"Storing entry {record.metadata.ins} despite failed validation: {e.message}")
        return self.store.write_entry(record)

    def get_digest(self, today: date | None = None) -> EntryDigest:
        """Summary of the stored entries."""
        return build_digest(self.store.read_entries(), today)
