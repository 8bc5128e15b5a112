"""Vocabulary loading for delspell."""

from delspell.data.dictionary import (
    DictionaryFormatError,
    load_dictionary,
    load_wordfreq_entries,
    parse_dictionary_lines,
)

__all__ = [
    "DictionaryFormatError",
    "load_dictionary",
    "load_wordfreq_entries",
    "parse_dictionary_lines",
]
