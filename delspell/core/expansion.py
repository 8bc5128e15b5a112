"""Query expansion: probe the deletion index with deletions of the query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from delspell.utils.constants import Constants

if TYPE_CHECKING:
    from delspell.storage.base import DictionaryStore


def expand_query(
    term: str,
    store: "DictionaryStore",
    max_distance: int,
    expansion_limit: int = Constants.EXPANSION_LIMIT,
) -> set[str]:
    """Collect candidate words for ``term``.

    The term and its deletions (up to ``max_distance`` levels deep, breadth
    first) are each probed once against the store. A probe contributes the
    words indexed under that variant, plus the variant itself when it is a
    dictionary word. At most ``expansion_limit`` probes are made.

    Args:
        term: Query term
        store: Store to probe
        max_distance: Effective distance, already capped to the store's bound
        expansion_limit: Maximum number of probes

    Returns:
        Set of candidate words, not yet distance-checked
    """
    candidates: set[str] = set()
    if not term:
        return candidates

    if store.contains(term):
        candidates.add(term)

    seen = {term}
    level = [term]
    probes = 0
    depth = 0
    while level:
        next_level: list[str] = []
        for variant in level:
            if probes >= expansion_limit:
                logger.debug(
                    f"Expansion of {term!r} stopped after {probes:,} probes "
                    f"(limit {expansion_limit:,})"
                )
                return candidates
            probes += 1

            candidates.update(store.candidates_for_variant(variant))
            if depth > 0 and store.contains(variant):
                candidates.add(variant)

            if depth >= max_distance or not variant:
                continue
            for i in range(len(variant)):
                deletion = variant[:i] + variant[i + 1 :]
                if deletion not in seen:
                    seen.add(deletion)
                    next_level.append(deletion)
        level = next_level
        depth += 1

    return candidates
