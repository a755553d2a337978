"""Field validators and record validation - pure, no I/O."""

import re

from .entry import TIME_BUCKETS, EntryRecord, format_entry_date, parse_entry_date
from .errors import DomainError, ErrorCode

INS_LENGTH = 13
MAX_TAG_LENGTH = 12
MAX_MESSAGE_LENGTH = 32

TAG_PATTERN = re.compile(r"[a-z0-9]+")
MESSAGE_PATTERN = re.compile(r"[A-Za-z0-9 +\-=.,:_\\/()<>$]+")
INS_PATTERN = re.compile(r"[0-9]+")


def validate_tag(tag: str) -> str:
    """Lowercase alphanumeric, at most 12 characters."""
    if not TAG_PATTERN.fullmatch(tag):
        raise DomainError(
            ErrorCode.INVALID_FORMAT,
            "Only lowercase alphanumerical characters allowed in tag",
        )
    if len(tag) > MAX_TAG_LENGTH:
        raise DomainError(
            ErrorCode.MAX_LENGTH_EXCEEDED,
            f"Maximum length for tag is {MAX_TAG_LENGTH}",
        )
    return tag


def validate_date(value: str) -> str:
    """Parse dd-mon-yy and return it normalized to lowercase."""
    try:
        parsed = parse_entry_date(value)
    except ValueError:
        raise DomainError(ErrorCode.INVALID_FORMAT, "Expected <dd-mon-yy>")
    return format_entry_date(parsed)


def normalize_date(value: str) -> str:
    """Canonical lowercase form of a parseable date; anything else unchanged."""
    try:
        return format_entry_date(parse_entry_date(value))
    except ValueError:
        return value


def validate_time(value: str) -> str:
    if value not in TIME_BUCKETS:
        raise DomainError(
            ErrorCode.INVALID_FORMAT,
            f"Expected one of the following: {', '.join(TIME_BUCKETS)}",
        )
    return value


def validate_ins(ins: str) -> str:
    """Exactly 13 digits (epoch milliseconds)."""
    if len(ins) != INS_LENGTH:
        raise DomainError(
            ErrorCode.MAX_LENGTH_EXCEEDED,
            f"Length for ins must be {INS_LENGTH}",
        )
    if not INS_PATTERN.fullmatch(ins):
        raise DomainError(ErrorCode.INVALID_FORMAT, "Ins must be a number")
    return ins


def validate_message(message: str) -> str:
    """Restricted character set, no leading space, at most 32 characters."""
    if not MESSAGE_PATTERN.fullmatch(message):
        raise DomainError(
            ErrorCode.INVALID_FORMAT,
            "Invalid characters found in message",
        )
    if message.startswith(" "):
        raise DomainError(
            ErrorCode.INVALID_FORMAT,
            "Message cannot start with a space",
        )
    if len(message) > MAX_MESSAGE_LENGTH:
        raise DomainError(
            ErrorCode.MAX_LENGTH_EXCEEDED,
            f"Maximum length for message is {MAX_MESSAGE_LENGTH}",
        )
    return message


def validate(record: EntryRecord) -> str:
    """
    Validate every field of a record, stopping at the first failure.

    Order: missing ins, tag, date, time, ins, message.

    Returns:
        Confirmation string referencing the insertion id.

    Raises:
        DomainError: Describing which check failed.
    """
    ins = record.metadata.ins
    if ins is None:
        raise DomainError(ErrorCode.MISSING_INS, "Missing ins")

    checks = (
        ("tag", validate_tag, record.metadata.tag),
        ("date", validate_date, record.metadata.date),
        ("time", validate_time, record.metadata.time),
        ("ins", validate_ins, ins),
        ("message", validate_message, record.message),
    )
    for name, check, value in checks:
        try:
            check(value)
        except DomainError as e:
            raise DomainError(e.code, f"Invalid {name}: {e.message}") from e

    return f"Entry validated: {ins}"


class RecordValidator:
    """
    Default record validator.

    Implements EntryValidator protocol by delegating to the pure field
    validators in this module.
    """

    def validate(self, record: EntryRecord) -> str:
        return validate(record)
