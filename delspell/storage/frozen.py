"""Dictionary store built once and never modified."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Iterable, Iterator

from tqdm import tqdm

from delspell.core.deletes import generate_deletes
from delspell.core.types import Entries, Entry
from delspell.storage.base import DictionaryStore, ReadOnlyStoreError

_EMPTY: frozenset[str] = frozenset()


def aggregate_entries(entries: Entries) -> dict[str, int]:
    """Fold (word, frequency) pairs into a dictionary, summing duplicates.

    Empty words are dropped. Negative frequencies raise ValueError.
    """
    dictionary: dict[str, int] = {}
    for word, frequency in entries:
        if frequency < 0:
            raise ValueError(f"frequency must be >= 0, got {frequency} for {word!r}")
        if not word:
            continue
        dictionary[word] = dictionary.get(word, 0) + frequency
    return dictionary


def index_words(
    words: Iterable[str],
    max_distance: int,
    on_word: Callable[[str, set[str]], None] | None = None,
) -> dict[str, frozenset[str]]:
    """Build the deletion index for ``words``.

    Args:
        words: Words to index, each at most once
        max_distance: Deletion depth
        on_word: Called with each word and its variants before they are indexed

    Returns:
        Mapping of variant to the words it was derived from
    """
    deletes: dict[str, set[str]] = {}
    for word in words:
        variants = generate_deletes(word, max_distance)
        if on_word is not None:
            on_word(word, variants)
        for variant in variants:
            deletes.setdefault(variant, set()).add(word)
    return {variant: frozenset(found) for variant, found in deletes.items()}


class FrozenStore(DictionaryStore):
    """Immutable store, safe to share between threads without locking.

    Use ``FrozenStore.build`` to index a batch of entries, or
    ``FrozenStore.from_maps`` to wrap an index that was computed elsewhere
    (for example a snapshot file).
    """

    def __init__(
        self,
        max_distance: int,
        dictionary: Mapping[str, int],
        deletes: Mapping[str, frozenset[str]],
    ) -> None:
        super().__init__(max_distance)
        self._dictionary = MappingProxyType(dict(dictionary))
        self._deletes = MappingProxyType(dict(deletes))

    @classmethod
    def build(
        cls, max_distance: int, entries: Entries, progress: bool = False
    ) -> FrozenStore:
        """Index a batch of entries. Duplicate words have their frequencies summed."""
        dictionary = aggregate_entries(entries)
        words: Iterable[str] = dictionary
        if progress:
            words = tqdm(dictionary, desc="  Indexing words", unit="word", leave=False)
        return cls(max_distance, dictionary, index_words(words, max_distance))

    @classmethod
    def from_maps(
        cls,
        max_distance: int,
        dictionary: Mapping[str, int],
        deletes: Mapping[str, Iterable[str]],
    ) -> FrozenStore:
        """Wrap a precomputed dictionary and deletion index."""
        frozen = {variant: frozenset(found) for variant, found in deletes.items()}
        return cls(max_distance, dictionary, frozen)

    def insert(self, word: str, frequency: int) -> bool:
        raise ReadOnlyStoreError(f"Cannot insert {word!r}: frozen stores are read-only")

    def frequency_of(self, word: str) -> int | None:
        return self._dictionary.get(word)

    def candidates_for_variant(self, variant: str) -> frozenset[str]:
        return self._deletes.get(variant, _EMPTY)

    def contains(self, word: str) -> bool:
        return word in self._dictionary

    def entries(self) -> Iterator[Entry]:
        return iter(self._dictionary.items())

    def deletes(self) -> Iterator[tuple[str, frozenset[str]]]:
        """Iterate over (variant, words) pairs of the deletion index."""
        return iter(self._deletes.items())

    def variant_count(self) -> int:
        return len(self._deletes)

    def __len__(self) -> int:
        return len(self._dictionary)
