"""Type definitions for delspell."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Verbosity(Enum):
    """Which suggestions a lookup returns."""

    TOP = "top"  # single best suggestion
    CLOSEST = "closest"  # every suggestion at the minimum distance
    ALL = "all"  # every suggestion within the distance bound

    @classmethod
    def parse(cls, value: "Verbosity | str") -> "Verbosity":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown verbosity {value!r}, expected one of: {choices}")


@dataclass(frozen=True)
class Suggestion:
    """A dictionary word returned by a lookup."""

    term: str
    frequency: int
    distance: int

    def __str__(self) -> str:
        return f"{self.term} (distance {self.distance}, frequency {self.frequency})"


# (word, frequency) pairs as produced by the dictionary loaders
Entry = tuple[str, int]
Entries = Iterable[Entry]
