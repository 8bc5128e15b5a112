"""Core lookup algorithms for delspell."""

from .config import Config, load_config
from .deletes import generate_deletes, iter_delete_levels
from .distance import damerau_levenshtein, verify_candidates
from .expansion import expand_query
from .selection import select_suggestions
from .types import Entries, Entry, Suggestion, Verbosity

__all__ = [
    "Config",
    "Entries",
    "Entry",
    "Suggestion",
    "Verbosity",
    "damerau_levenshtein",
    "expand_query",
    "generate_deletes",
    "iter_delete_levels",
    "load_config",
    "select_suggestions",
    "verify_candidates",
]
