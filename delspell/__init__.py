"""delspell - fuzzy word lookup with a symmetric-delete index.

Find dictionary words within a bounded edit distance of a query term, ranked
by distance and frequency.
"""

from delspell.core import Config, Suggestion, Verbosity, damerau_levenshtein, load_config
from delspell.engine import SymSpell
from delspell.pipeline import run_pipeline
from delspell.storage import (
    DictionaryStore,
    FrozenStore,
    MutableStore,
    ReadOnlyStoreError,
    build_snapshot,
    read_snapshot,
    write_snapshot,
)
from delspell.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "DictionaryStore",
    "FrozenStore",
    "MutableStore",
    "ReadOnlyStoreError",
    "Suggestion",
    "SymSpell",
    "Verbosity",
    "build_snapshot",
    "damerau_levenshtein",
    "load_config",
    "read_snapshot",
    "run_pipeline",
    "setup_logger",
    "write_snapshot",
]
