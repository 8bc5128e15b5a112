"""Dictionary stores and snapshots for delspell."""

from delspell.storage.base import DictionaryStore, ReadOnlyStoreError
from delspell.storage.frozen import FrozenStore, aggregate_entries, index_words
from delspell.storage.mutable import MutableStore
from delspell.storage.snapshot import (
    SnapshotTooLargeError,
    build_snapshot,
    read_snapshot,
    write_snapshot,
)

__all__ = [
    "DictionaryStore",
    "FrozenStore",
    "MutableStore",
    "ReadOnlyStoreError",
    "SnapshotTooLargeError",
    "aggregate_entries",
    "index_words",
    "build_snapshot",
    "read_snapshot",
    "write_snapshot",
]
