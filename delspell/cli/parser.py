"""Command-line interface for delspell."""

import argparse

from delspell.core.types import Verbosity
from delspell.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="delspell",
        description="Fuzzy lookup of words against a dictionary (symmetric delete)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Best suggestion for each term from a plain word list
  %(prog)s --dictionary words.txt helo wrold

  # Every suggestion within distance 2, frequencies taken from the file
  %(prog)s --dictionary counts.txt --has-freq --verbosity all teso

  # Use the 50,000 most common English words from wordfreq
  %(prog)s --top-n 50000 --verbosity closest recieve

  # Build a snapshot once, then serve lookups from it
  %(prog)s --dictionary words.txt --lowercase --build-snapshot words.snapshot.yml -v
  %(prog)s --snapshot words.snapshot.yml helo

  # Terms are read from stdin, one per line, when none are given
  cat typos.txt | %(prog)s --dictionary words.txt

Dictionary files hold one entry per line. Blank lines and lines starting with
'#' are ignored. With --has-freq each line is 'word frequency'.

Example config.json:
{
  "dictionary": "words.txt",
  "has_freq": true,
  "lowercase": true,
  "max_distance": 2,
  "verbosity": "closest",
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Vocabulary
    parser.add_argument("--dictionary", type=str, help="Dictionary file, one entry per line")
    parser.add_argument(
        "--has-freq",
        action="store_true",
        help="Dictionary lines are 'word frequency' instead of bare words",
    )
    parser.add_argument(
        "--lowercase", action="store_true", help="Lowercase dictionary words when loading"
    )
    parser.add_argument("--top-n", type=int, help="Add the top N most common words from wordfreq")
    parser.add_argument("--snapshot", type=str, help="Load a prebuilt snapshot file")

    # Lookup
    parser.add_argument(
        "--max-distance",
        type=int,
        default=Constants.DEFAULT_MAX_DISTANCE,
        help="Maximum edit distance indexed and searched",
    )
    parser.add_argument(
        "--verbosity",
        type=str,
        choices=[v.value for v in Verbosity],
        default=Verbosity.TOP.value,
        help="top: best match, closest: all at minimum distance, all: everything in range",
    )
    parser.add_argument(
        "--expansion-limit",
        type=int,
        default=Constants.EXPANSION_LIMIT,
        help="Maximum index probes per query",
    )

    # Snapshots
    parser.add_argument(
        "--build-snapshot", type=str, help="Write a snapshot of the vocabulary here and exit"
    )
    parser.add_argument(
        "--max-deletes",
        type=int,
        default=Constants.DEFAULT_MAX_DELETES,
        help="Refuse to build snapshots with more deletion entries than this (0 = no limit)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    parser.add_argument("terms", nargs="*", help="Terms to look up (default: read stdin)")

    return parser
