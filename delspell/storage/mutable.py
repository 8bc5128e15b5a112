"""Incrementally built dictionary store."""

from typing import Iterator

from loguru import logger

from delspell.core.deletes import generate_deletes
from delspell.core.types import Entry
from delspell.storage.base import DictionaryStore


class MutableStore(DictionaryStore):
    """Store that grows one word at a time.

    Inserting a word that is already present replaces its frequency. Readers
    may run concurrently with each other but not with ``insert``.
    """

    def __init__(self, max_distance: int) -> None:
        super().__init__(max_distance)
        self._dictionary: dict[str, int] = {}
        self._deletes: dict[str, set[str]] = {}

    def insert(self, word: str, frequency: int) -> bool:
        """Add or update ``word``.

        Returns:
            False if the word was empty and skipped, True otherwise
        """
        if not isinstance(word, str):
            raise TypeError(f"word must be a string, got {type(word)}")
        if frequency < 0:
            raise ValueError(f"frequency must be >= 0, got {frequency} for {word!r}")
        if not word:
            logger.debug("Skipping empty dictionary word")
            return False

        already_indexed = word in self._dictionary
        self._dictionary[word] = frequency
        if already_indexed:
            return True

        for variant in generate_deletes(word, self.max_distance):
            self._deletes.setdefault(variant, set()).add(word)
        return True

    def frequency_of(self, word: str) -> int | None:
        return self._dictionary.get(word)

    def candidates_for_variant(self, variant: str) -> frozenset[str]:
        words = self._deletes.get(variant)
        return frozenset(words) if words else frozenset()

    def contains(self, word: str) -> bool:
        return word in self._dictionary

    def entries(self) -> Iterator[Entry]:
        return iter(list(self._dictionary.items()))

    def variant_count(self) -> int:
        return len(self._deletes)

    def __len__(self) -> int:
        return len(self._dictionary)
