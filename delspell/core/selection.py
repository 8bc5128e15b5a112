"""Verbosity-driven filtering and ranking of verified suggestions."""

from delspell.core.types import Suggestion, Verbosity


def _by_frequency(suggestion: Suggestion) -> int:
    return -suggestion.frequency


def _by_distance_then_frequency(suggestion: Suggestion) -> tuple[int, int]:
    return suggestion.distance, -suggestion.frequency


def select_suggestions(
    suggestions: list[Suggestion], verbosity: Verbosity | str
) -> list[Suggestion]:
    """Filter and order suggestions for the requested verbosity.

    TOP returns the single most frequent suggestion at the minimum distance
    (the earliest one wins a frequency tie). CLOSEST returns every suggestion
    at the minimum distance, most frequent first. ALL returns everything,
    closest first and most frequent first within a distance. Sorting is
    stable, so input order breaks the remaining ties.
    """
    verbosity = Verbosity.parse(verbosity)
    if not suggestions:
        return []

    if verbosity is Verbosity.ALL:
        return sorted(suggestions, key=_by_distance_then_frequency)

    min_distance = min(s.distance for s in suggestions)
    closest = [s for s in suggestions if s.distance == min_distance]

    if verbosity is Verbosity.TOP:
        best = closest[0]
        for suggestion in closest[1:]:
            if suggestion.frequency > best.frequency:
                best = suggestion
        return [best]

    return sorted(closest, key=_by_frequency)
