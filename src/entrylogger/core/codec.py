"""One-line text codec for entry records.

Line format:

    [ins:<ins> date:<date> time:<time> tag:<tag>] <message>

Decoding reconstructs structure only; field contents are not re-validated.
"""

import re

from .entry import EntryMetadata, EntryRecord
from .errors import EntryParseError

METADATA_PATTERN = re.compile(r"\[(.*?)\]")
METADATA_KEYS = ("ins", "date", "time", "tag")


def encode_entry(record: EntryRecord) -> str:
    """Serialize a record to its line form (no trailing newline)."""
    meta = record.metadata
    if meta.ins is None:
        raise ValueError("Cannot encode an entry without ins")
    return (
        f"[ins:{meta.ins} date:{meta.date} time:{meta.time} tag:{meta.tag}] "
        f"{record.message}"
    )


def decode_entry(line: str) -> EntryRecord:
    """
    Parse a stored line back into a record.

    Raises:
        EntryParseError: If the metadata block is missing or holds an
            unrecognized key.
    """
    match = METADATA_PATTERN.search(line)
    if not match:
        raise EntryParseError(f"Couldn't parse string to Entry: {line}")

    fields: dict[str, str | None] = {"ins": None, "date": "", "time": "", "tag": ""}
    for token in match.group(1).split(" "):
        key, sep, value = token.partition(":")
        if not sep or key not in METADATA_KEYS:
            raise EntryParseError(f"Invalid value detected in metadata: {line}")
        fields[key] = value

    message = line[match.end():].lstrip()
    return EntryRecord(
        metadata=EntryMetadata(
            ins=fields["ins"],
            date=fields["date"],
            time=fields["time"],
            tag=fields["tag"],
        ),
        message=message,
    )
