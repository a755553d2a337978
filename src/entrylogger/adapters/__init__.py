"""Adapters - I/O implementations of ports."""

from .file_store import FileEntryStore, FileStoreConfig
from .memory_store import InMemoryEntryStore

__all__ = [
    "FileEntryStore",
    "FileStoreConfig",
    "InMemoryEntryStore",
]
