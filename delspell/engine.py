"""Lookup engine tying stores, expansion, verification and selection together."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from delspell.core import (
    Suggestion,
    Verbosity,
    expand_query,
    select_suggestions,
    verify_candidates,
)
from delspell.core.types import Entries
from delspell.storage import (
    DictionaryStore,
    FrozenStore,
    MutableStore,
    ReadOnlyStoreError,
    aggregate_entries,
    read_snapshot,
)
from delspell.utils import Constants


class SymSpell:
    """Symmetric-delete spelling lookup over a fixed vocabulary.

    ``SymSpell(max_distance)`` starts with an empty mutable store that grows
    through ``load``/``load_batch``; re-loading a word replaces its frequency.
    ``SymSpell.from_entries`` and ``SymSpell.from_snapshot`` wrap a frozen store
    instead. Duplicate words within one batch have their frequencies summed,
    whichever store the batch goes to.

    Lookups never modify the store. A mutable engine must not be loaded while
    other threads are looking up; a frozen engine can be shared freely.
    """

    def __init__(
        self,
        max_distance: int = Constants.DEFAULT_MAX_DISTANCE,
        store: DictionaryStore | None = None,
        expansion_limit: int = Constants.EXPANSION_LIMIT,
    ) -> None:
        if store is None:
            store = MutableStore(max_distance)
        elif store.max_distance != max_distance:
            raise ValueError(
                f"Store was indexed at max distance {store.max_distance}, "
                f"engine configured for {max_distance}"
            )
        if expansion_limit < 1:
            raise ValueError(f"expansion_limit must be >= 1, got {expansion_limit}")
        self._store = store
        self._expansion_limit = expansion_limit

    @classmethod
    def from_entries(
        cls,
        max_distance: int,
        entries: Entries,
        expansion_limit: int = Constants.EXPANSION_LIMIT,
        progress: bool = False,
    ) -> SymSpell:
        """Build a read-only engine from a batch of (word, frequency) pairs."""
        store = FrozenStore.build(max_distance, entries, progress=progress)
        logger.debug(
            f"Built frozen store: {len(store):,} words, {store.variant_count():,} variants"
        )
        return cls(max_distance, store, expansion_limit)

    @classmethod
    def from_snapshot(
        cls, path: str | Path, expansion_limit: int = Constants.EXPANSION_LIMIT
    ) -> SymSpell:
        """Build a read-only engine from a snapshot file."""
        store = read_snapshot(path)
        return cls(store.max_distance, store, expansion_limit)

    @property
    def max_distance(self) -> int:
        return self._store.max_distance

    @property
    def store(self) -> DictionaryStore:
        return self._store

    @property
    def expansion_limit(self) -> int:
        return self._expansion_limit

    def load(self, word: str, frequency: int = Constants.DEFAULT_FREQUENCY) -> None:
        """Add ``word`` or replace its frequency.

        Raises:
            ReadOnlyStoreError: If the engine wraps a frozen store
        """
        if not isinstance(self._store, MutableStore):
            raise ReadOnlyStoreError(
                f"Cannot load {word!r}: {self._store.get_name()} store is read-only"
            )
        self._store.insert(word, frequency)

    def load_batch(self, entries: Entries) -> int:
        """Load a batch of (word, frequency) pairs.

        Duplicate words within the batch have their frequencies summed before
        loading. A word that was already loaded gets the batch total as its
        new frequency, as with ``load``.

        Returns:
            Number of distinct words loaded (empty words are skipped)

        Raises:
            ReadOnlyStoreError: If the engine wraps a frozen store
            ValueError: If a frequency is negative
        """
        if not isinstance(self._store, MutableStore):
            raise ReadOnlyStoreError(
                f"Cannot load entries: {self._store.get_name()} store is read-only"
            )
        loaded = 0
        for word, frequency in aggregate_entries(entries).items():
            if self._store.insert(word, frequency):
                loaded += 1
        return loaded

    def lookup(
        self,
        term: str,
        max_distance: int | None = None,
        verbosity: Verbosity | str = Verbosity.TOP,
    ) -> list[Suggestion]:
        """Find dictionary words close to ``term``.

        Args:
            term: Query term
            max_distance: Maximum edit distance, capped to the engine's own;
                None uses the engine's
            verbosity: TOP, CLOSEST or ALL (enum or string value)

        Returns:
            Suggestions ordered by rank, empty when nothing is close enough
        """
        verbosity = Verbosity.parse(verbosity)
        if max_distance is None:
            max_distance = self.max_distance
        elif max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        if not term:
            return []

        effective = min(max_distance, self.max_distance)
        candidates = expand_query(term, self._store, effective, self._expansion_limit)
        suggestions = verify_candidates(term, candidates, self._store, effective)
        return select_suggestions(suggestions, verbosity)

    def find_top(self, term: str) -> Suggestion | None:
        """Best suggestion within the engine's max distance, or None."""
        results = self.lookup(term, self.max_distance, Verbosity.TOP)
        return results[0] if results else None

    def find_closest(self, term: str) -> list[Suggestion]:
        return self.lookup(term, self.max_distance, Verbosity.CLOSEST)

    def find_all(self, term: str) -> list[Suggestion]:
        return self.lookup(term, self.max_distance, Verbosity.ALL)

    def frequency_of(self, word: str) -> int | None:
        return self._store.frequency_of(word)

    def contains(self, word: str) -> bool:
        return self._store.contains(word)

    def __contains__(self, word: object) -> bool:
        return word in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(max_distance={self.max_distance}, "
            f"words={len(self._store)}, store={self._store.get_name()})"
        )
