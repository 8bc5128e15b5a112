"""Main processing pipeline: load a vocabulary, then answer lookups."""

import sys
import time
from typing import Iterable, TextIO

from loguru import logger

from delspell.core import Config, Suggestion
from delspell.core.types import Entry
from delspell.data import load_dictionary, load_wordfreq_entries
from delspell.engine import SymSpell
from delspell.storage import build_snapshot, write_snapshot
from delspell.utils.logging import is_debug_enabled


def load_entries(config: Config) -> list[Entry]:
    """Gather (word, frequency) pairs from every configured source."""
    entries = load_dictionary(
        config.dictionary, config.has_freq, config.lowercase, verbose=config.verbose
    )
    entries.extend(load_wordfreq_entries(config.top_n, verbose=config.verbose))
    return entries


def build_engine(config: Config) -> SymSpell:
    """Create a read-only engine from a snapshot or the configured sources."""
    start = time.time()
    if config.snapshot:
        if config.verbose:
            logger.info(f"Loading snapshot {config.snapshot}...")
        engine = SymSpell.from_snapshot(config.snapshot, config.expansion_limit)
        if engine.max_distance != config.max_distance:
            logger.warning(
                f"Snapshot was built for max distance {engine.max_distance}; "
                f"using it instead of {config.max_distance}"
            )
    else:
        if config.verbose:
            logger.info("Loading vocabulary...")
        engine = SymSpell.from_entries(
            config.max_distance,
            load_entries(config),
            config.expansion_limit,
            progress=config.verbose,
        )

    if config.verbose:
        logger.info(
            f"  {len(engine):,} words ready at max distance {engine.max_distance} "
            f"({time.time() - start:.2f}s)"
        )
    return engine


def format_results(term: str, suggestions: list[Suggestion]) -> list[str]:
    """Render the suggestions for one term as output lines."""
    if not suggestions:
        return [f"{term} -> (no suggestions)"]
    return [f"{term} -> {suggestion}" for suggestion in suggestions]


def _read_terms(stream: TextIO) -> Iterable[str]:
    for line in stream:
        term = line.strip()
        if term:
            yield term


def run_pipeline(
    config: Config, output: TextIO | None = None, terms_input: TextIO | None = None
) -> SymSpell | None:
    """Run the configured lookups, or build a snapshot when asked to.

    Args:
        config: Validated configuration
        output: Where to print results (default stdout)
        terms_input: Where to read terms when none are configured (default stdin)

    Returns:
        The engine used for lookups, or None after writing a snapshot
    """
    output = output or sys.stdout

    if config.build_snapshot:
        start = time.time()
        store = build_snapshot(
            load_entries(config),
            config.max_distance,
            max_deletes=config.max_deletes,
            verbose=config.verbose,
        )
        write_snapshot(store, config.build_snapshot)
        if config.verbose:
            logger.info(
                f"Wrote snapshot of {len(store):,} words to {config.build_snapshot} "
                f"({time.time() - start:.2f}s)"
            )
        return None

    engine = build_engine(config)
    terms = config.terms or _read_terms(terms_input or sys.stdin)
    debug_enabled = is_debug_enabled()

    for term in terms:
        suggestions = engine.lookup(term, config.max_distance, config.verbosity)
        if debug_enabled:
            known = "known" if engine.contains(term) else "unknown"
            logger.debug(f"{term!r} ({known}): {len(suggestions)} suggestion(s)")
        for line in format_results(term, suggestions):
            print(line, file=output)

    return engine
