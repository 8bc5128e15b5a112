"""Read contract shared by every dictionary store."""

from abc import ABC, abstractmethod
from typing import Iterator

from delspell.core.types import Entry


class ReadOnlyStoreError(RuntimeError):
    """Raised when a frozen store is asked to change."""


class DictionaryStore(ABC):
    """Word frequencies plus the deletion index built from them.

    Lookups are written against this interface only, so any store that was
    built with the same deletion rule can serve them.
    """

    def __init__(self, max_distance: int) -> None:
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        self._max_distance = max_distance

    @property
    def max_distance(self) -> int:
        """Deletion depth the index was built with."""
        return self._max_distance

    @abstractmethod
    def frequency_of(self, word: str) -> int | None:
        """Return the stored frequency of ``word``, or None if absent."""

    @abstractmethod
    def candidates_for_variant(self, variant: str) -> frozenset[str]:
        """Return the words indexed under ``variant`` (empty if none)."""

    @abstractmethod
    def contains(self, word: str) -> bool:
        """Return True if ``word`` is a dictionary word."""

    @abstractmethod
    def entries(self) -> Iterator[Entry]:
        """Iterate over (word, frequency) pairs."""

    @abstractmethod
    def variant_count(self) -> int:
        """Number of distinct deletion variants in the index."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of dictionary words."""

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def get_name(self) -> str:
        """Return store name for display."""
        return self.__class__.__name__.replace("Store", "").lower()
