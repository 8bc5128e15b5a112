"""Edit distance verification of index candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from delspell.core.types import Suggestion
from delspell.utils.constants import Constants

if TYPE_CHECKING:
    from delspell.storage.base import DictionaryStore


def damerau_levenshtein(a: str, b: str) -> int:
    """Damerau-Levenshtein distance (optimal string alignment variant).

    Insertions, deletions, substitutions and adjacent transpositions all cost
    one. Strings are compared code point by code point. The result is clamped
    to ``Constants.MAX_DISTANCE_VALUE``.
    """
    cap = Constants.MAX_DISTANCE_VALUE
    len_a, len_b = len(a), len(b)
    if len_a == 0:
        return min(len_b, cap)
    if len_b == 0:
        return min(len_a, cap)

    # Three rolling rows: two rows back is needed for transpositions
    prev_prev: list[int] = []
    prev = list(range(len_b + 1))
    for i in range(1, len_a + 1):
        current = [i] + [0] * len_b
        char_a = a[i - 1]
        for j in range(1, len_b + 1):
            char_b = b[j - 1]
            cost = 0 if char_a == char_b else 1
            best = min(
                prev[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                prev[j - 1] + cost,  # substitution
            )
            if i > 1 and j > 1 and char_a == b[j - 2] and a[i - 2] == char_b:
                best = min(best, prev_prev[j - 2] + 1)
            current[j] = best
        prev_prev, prev = prev, current

    return min(prev[len_b], cap)


def verify_candidates(
    term: str,
    candidates: Iterable[str],
    store: "DictionaryStore",
    max_distance: int,
) -> list[Suggestion]:
    """Keep the candidates whose true distance to ``term`` is within bound.

    Index membership only proves the candidate and the term share a deletion
    variant, so every candidate is measured. Candidates are visited in sorted
    order, which makes the output order deterministic.

    Args:
        term: The untouched query term
        candidates: Words surfaced by query expansion
        store: Store the candidates came from, used for frequencies
        max_distance: Effective distance bound

    Returns:
        Suggestions in candidate order, unsorted by rank
    """
    suggestions = []
    for candidate in sorted(set(candidates)):
        distance = damerau_levenshtein(term, candidate)
        if distance > max_distance:
            continue
        frequency = store.frequency_of(candidate)
        suggestions.append(
            Suggestion(term=candidate, frequency=frequency or 0, distance=distance)
        )
    return suggestions
