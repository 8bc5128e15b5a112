"""Precomputed snapshots: build a frozen index offline, ship it as a file."""

from pathlib import Path
from typing import Any, Iterable, TextIO

from loguru import logger
from tqdm import tqdm
import yaml

from delspell.core.types import Entries
from delspell.storage.frozen import FrozenStore, aggregate_entries, index_words
from delspell.utils import Constants, expand_file_path, write_file_safely


class SnapshotTooLargeError(ValueError):
    """Raised when a snapshot would exceed its deletion-entry budget."""


def build_snapshot(
    entries: Entries,
    max_distance: int,
    max_deletes: int = Constants.DEFAULT_MAX_DELETES,
    verbose: bool = False,
) -> FrozenStore:
    """Build a frozen store for writing to disk.

    Duplicate words have their frequencies summed. Generation aborts as soon
    as the number of (variant, word) index entries exceeds ``max_deletes``;
    pass 0 to disable the budget.

    Raises:
        SnapshotTooLargeError: If the index outgrows ``max_deletes``
    """
    dictionary = aggregate_entries(entries)
    if verbose:
        logger.info(f"  Indexing {len(dictionary):,} words at max distance {max_distance}...")

    words: Iterable[str] = dictionary
    if verbose:
        words = tqdm(dictionary, desc="  Building snapshot", unit="word", leave=False)

    total_deletes = 0

    def check_budget(word: str, variants: set[str]) -> None:
        nonlocal total_deletes
        total_deletes += len(variants)
        if max_deletes and total_deletes > max_deletes:
            raise SnapshotTooLargeError(
                f"Snapshot would hold more than {max_deletes:,} deletion entries "
                f"(reached at {word!r}). Increase max_deletes or lower max_distance."
            )

    deletes = index_words(words, max_distance, on_word=check_budget)

    if verbose:
        logger.info(f"  Generated {total_deletes:,} deletion entries ({len(deletes):,} variants)")

    return FrozenStore(max_distance, dictionary, deletes)


def snapshot_to_dict(store: FrozenStore) -> dict[str, Any]:
    """Serialise a frozen store into plain, deterministically ordered data."""
    return {
        "format": Constants.SNAPSHOT_FORMAT,
        "version": Constants.SNAPSHOT_VERSION,
        "max_distance": store.max_distance,
        "dictionary": dict(sorted(store.entries())),
        "deletes": {variant: sorted(words) for variant, words in sorted(store.deletes())},
    }


def snapshot_from_dict(data: Any) -> FrozenStore:
    """Rebuild a frozen store from ``snapshot_to_dict`` output.

    Raises:
        ValueError: If the data is not a supported snapshot
    """
    if not isinstance(data, dict) or data.get("format") != Constants.SNAPSHOT_FORMAT:
        raise ValueError("Not a delspell snapshot")
    version = data.get("version")
    if version != Constants.SNAPSHOT_VERSION:
        raise ValueError(f"Unsupported snapshot version: {version}")

    max_distance = data.get("max_distance")
    dictionary = data.get("dictionary") or {}
    deletes = data.get("deletes") or {}
    if not isinstance(max_distance, int) or max_distance < 0:
        raise ValueError(f"Invalid snapshot max_distance: {max_distance!r}")
    if not isinstance(dictionary, dict) or not isinstance(deletes, dict):
        raise ValueError("Snapshot dictionary and deletes must be mappings")

    # YAML turns a few bare words (yes, null, 1...) into other types
    dictionary = {str(word): int(frequency) for word, frequency in dictionary.items()}
    deletes = {
        "" if variant is None else str(variant): [str(word) for word in words]
        for variant, words in deletes.items()
    }
    return FrozenStore.from_maps(max_distance, dictionary, deletes)


def write_snapshot(store: FrozenStore, path: str | Path) -> None:
    """Write ``store`` to ``path`` as a YAML snapshot."""

    def _dump(stream: TextIO) -> None:
        try:
            yaml.safe_dump(
                snapshot_to_dict(store),
                stream,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
            )
        except yaml.YAMLError as e:
            logger.error(f"✗ YAML serialization error writing snapshot: {e}")
            raise

    write_file_safely(expand_file_path(path) or path, _dump, "writing snapshot")


def read_snapshot(path: str | Path) -> FrozenStore:
    """Load a snapshot written by ``write_snapshot``."""
    snapshot_path = expand_file_path(path) or str(path)
    try:
        with open(snapshot_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"✗ Snapshot file not found: {snapshot_path}")
        logger.error("  Build one with --build-snapshot first")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading snapshot: {snapshot_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"✗ Invalid YAML in snapshot {snapshot_path}: {e}")
        raise

    try:
        return snapshot_from_dict(data)
    except ValueError as e:
        logger.error(f"✗ Invalid snapshot {snapshot_path}: {e}")
        raise
