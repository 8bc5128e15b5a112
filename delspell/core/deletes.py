"""Deletion variant generation for the symmetric-delete index."""

from typing import Iterator


def _single_deletions(text: str) -> Iterator[str]:
    for i in range(len(text)):
        yield text[:i] + text[i + 1 :]


def iter_delete_levels(word: str, max_distance: int) -> Iterator[set[str]]:
    """Yield the new deletion variants of each level, breadth first.

    Level 1 holds every single-character deletion of ``word``; level k+1 holds
    the single-character deletions of level k that no earlier level produced.
    Iteration stops after ``max_distance`` levels or at the first level that
    adds nothing.
    """
    if not isinstance(word, str):
        raise TypeError(f"word must be a string, got {type(word)}")
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")

    seen: set[str] = set()
    frontier = {word}
    for _level in range(max_distance):
        next_level: set[str] = set()
        for variant in frontier:
            if not variant:
                continue
            for deletion in _single_deletions(variant):
                if deletion not in seen:
                    seen.add(deletion)
                    next_level.add(deletion)
        if not next_level:
            break
        yield next_level
        frontier = next_level


def generate_deletes(word: str, max_distance: int) -> set[str]:
    """Return every variant reachable by 1..max_distance character deletions.

    The word itself is not included. The empty string is included when the
    word is short enough to be deleted away entirely.
    """
    deletes: set[str] = set()
    for level in iter_delete_levels(word, max_distance):
        deletes.update(level)
    return deletes
