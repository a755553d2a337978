"""Functional core - entry model, validation and codec with no I/O."""

from .errors import DomainError, EntryOrderError, EntryParseError, ErrorCode, PersistenceError
from .entry import (
    TIME_BUCKETS,
    EntryMetadata,
    EntryRecord,
    compare_entries,
    format_entry_date,
    parse_entry_date,
    sort_entries,
)
from .validation import (
    RecordValidator,
    normalize_date,
    validate,
    validate_date,
    validate_ins,
    validate_message,
    validate_tag,
    validate_time,
)
from .codec import decode_entry, encode_entry
from .digest import EntryDigest, build_digest

__all__ = [
    # Errors
    "DomainError",
    "EntryOrderError",
    "EntryParseError",
    "ErrorCode",
    "PersistenceError",
    # Entries
    "TIME_BUCKETS",
    "EntryMetadata",
    "EntryRecord",
    "compare_entries",
    "format_entry_date",
    "parse_entry_date",
    "sort_entries",
    # Validation
    "RecordValidator",
    "validate",
    "normalize_date",
    "validate_date",
    "validate_ins",
    "validate_message",
    "validate_tag",
    "validate_time",
    # Codec
    "decode_entry",
    "encode_entry",
    # Digest
    "EntryDigest",
    "build_digest",
]
