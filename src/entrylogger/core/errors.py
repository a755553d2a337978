"""Error kinds raised by the entry core and its storage adapters."""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level validation failure kinds."""

    INVALID_FORMAT = "invalid_format"
    MAX_LENGTH_EXCEEDED = "max_length_exceeded"
    MISSING_INS = "missing_ins"


class DomainError(Exception):
    """Raised when a field or record fails validation."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class PersistenceError(Exception):
    """Raised when the entry file cannot be opened, read or rewritten."""

    pass


class EntryParseError(PersistenceError):
    """Raised when a stored line cannot be decoded into an entry."""

    pass


class EntryOrderError(PersistenceError):
    """Raised when a stored or incoming entry has a date or ins that cannot be ordered."""

    pass
