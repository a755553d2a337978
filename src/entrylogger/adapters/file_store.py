"""Flat-file entry storage adapter."""

import logging
from dataclasses import dataclass
from pathlib import Path

from entrylogger.core.codec import decode_entry, encode_entry
from entrylogger.core.entry import EntryRecord, sort_entries
from entrylogger.core.errors import PersistenceError

logger = logging.getLogger(__name__)


@dataclass
class FileStoreConfig:
    """Location of the entry file and its backup."""

    file_name: str
    file_path: str
    current_extension: str
    backup_extension: str


class FileEntryStore:
    """
    Flat-file entry storage.

    Implements EntryStore protocol. One encoded entry per line, kept in
    canonical order. Every insert is a full read-sort-rewrite (O(n log n)
    per insert); the previous file is renamed to the backup path first.

    Crash window: between the rename and the end of the rewrite the current
    file is absent or partial and the backup holds the only intact copy.
    Recovery from the backup is manual.
    """

    def __init__(self, config: FileStoreConfig):
        self.config = config
        directory = Path(config.file_path).expanduser()
        self.current_path = directory / f"{config.file_name}{config.current_extension}"
        self.backup_path = directory / f"{config.file_name}{config.backup_extension}"

    def _ensure_file(self) -> None:
        """Create the current file (and its directory) if absent."""
        try:
            self.current_path.parent.mkdir(parents=True, exist_ok=True)
            self.current_path.touch(exist_ok=True)
        except OSError as e:
            logger.error(f"Couldn't open {self.current_path}: {e}")
            raise PersistenceError(f"Couldn't open {self.current_path}: {e}") from e

    def read_entries(self) -> list[EntryRecord]:
        """
        Read all entries in file order.

        Raises:
            PersistenceError: If the file cannot be opened or read.
            EntryParseError: On the first line that fails to decode.
        """
        self._ensure_file()
        try:
            content = self.current_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Couldn't read {self.current_path}: {e}")
            raise PersistenceError(f"Couldn't read {self.current_path}: {e}") from e

        entries = [decode_entry(line) for line in content.split("\n") if line]
        logger.debug(f"Read {len(entries)} entries from {self.current_path}")
        return entries

    def write_entry(self, entry: EntryRecord) -> EntryRecord:
        """
        Insert an entry and rewrite the whole file in sorted order.

        Returns:
            The entry as supplied.

        Raises:
            PersistenceError: If reading, renaming or rewriting fails. The
                on-disk state is left as the failed step left it.
        """
        entries = self.read_entries()
        entries.append(entry)
        entries = sort_entries(entries)

        self._backup()
        self._rewrite(entries)
        logger.info(f"Wrote entry {entry.metadata.ins} ({len(entries)} total)")
        return entry

    def _backup(self) -> None:
        """Move the current file over any previous backup."""
        try:
            self.current_path.replace(self.backup_path)
        except OSError as e:
            logger.error(f"Couldn't back up {self.current_path}: {e}")
            raise PersistenceError(f"Couldn't back up {self.current_path}: {e}") from e
        logger.debug(f"Backed up {self.current_path} to {self.backup_path}")

    def _rewrite(self, entries: list[EntryRecord]) -> None:
        """Recreate the current file with one encoded entry per line."""
        try:
            with open(self.current_path, "w", encoding="utf-8", buffering=1) as f:
                for item in entries:
                    f.write(encode_entry(item) + "\n")
        except OSError as e:
            logger.error(
                f"Rewrite of {self.current_path} failed, backup at {self.backup_path}: {e}"
            )
            raise PersistenceError(f"Couldn't write {self.current_path}: {e}") from e
