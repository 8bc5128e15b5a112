"""Dictionary loading: word list files and wordfreq vocabularies."""

from typing import Iterable, Iterator

from loguru import logger
from wordfreq import top_n_list, word_frequency

from delspell.core.types import Entry
from delspell.utils import Constants, expand_file_path


class DictionaryFormatError(ValueError):
    """Raised for a dictionary line that cannot be parsed."""

    def __init__(self, source: str, lineno: int, line: str, reason: str) -> None:
        super().__init__(f"{source}:{lineno}: {reason}: {line!r}")
        self.source = source
        self.lineno = lineno
        self.line = line


def parse_dictionary_lines(
    lines: Iterable[str],
    has_freq: bool = False,
    lowercase: bool = False,
    source: str = "<lines>",
) -> Iterator[Entry]:
    """Parse dictionary lines into (word, frequency) pairs.

    Blank lines and lines starting with ``#`` are skipped. Without
    ``has_freq`` every line is a word of frequency 1. With ``has_freq`` a line
    is ``word frequency``; anything after the second field is ignored.

    Raises:
        DictionaryFormatError: If a frequency is missing, not an integer, or negative
    """
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(Constants.COMMENT_PREFIX):
            continue

        if has_freq:
            parts = line.split()
            if len(parts) < 2:
                raise DictionaryFormatError(source, lineno, line, "expected 'word frequency'")
            word, freq_str = parts[0], parts[1]
            try:
                frequency = int(freq_str)
            except ValueError:
                raise DictionaryFormatError(
                    source, lineno, line, f"invalid frequency {freq_str!r}"
                ) from None
            if frequency < 0:
                raise DictionaryFormatError(source, lineno, line, "negative frequency")
        else:
            word, frequency = line, Constants.DEFAULT_FREQUENCY

        if lowercase:
            word = word.lower()
        yield word, frequency


def load_dictionary(
    filepath: str | None,
    has_freq: bool = False,
    lowercase: bool = False,
    verbose: bool = False,
) -> list[Entry]:
    """Load (word, frequency) pairs from a dictionary file."""
    if not filepath:
        return []

    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            entries = list(parse_dictionary_lines(f, has_freq, lowercase, source=filepath))
    except FileNotFoundError:
        logger.error(f"✗ Dictionary file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise
    except DictionaryFormatError as e:
        logger.error(f"✗ Malformed dictionary line: {e}")
        logger.error("  Lines must read 'word frequency' when has_freq is enabled")
        raise

    if verbose:
        logger.info(f"  Loaded {len(entries):,} entries from {filepath}")

    return entries


def load_wordfreq_entries(
    top_n: int | None,
    lang: str = "en",
    scale: int = Constants.WORDFREQ_SCALE,
    verbose: bool = False,
) -> list[Entry]:
    """Get the top N words from wordfreq with integer frequencies.

    wordfreq reports frequencies as proportions; they are multiplied by
    ``scale`` and rounded, with a floor of 1 so every word stays rankable.
    """
    if not top_n:
        return []

    if verbose:
        logger.info(f"  Loading top {top_n:,} words from wordfreq...")

    try:
        words = top_n_list(lang, top_n)
    except Exception as e:
        logger.error(f"✗ Failed to load words from wordfreq: {e}")
        logger.error("  This may indicate a problem with the 'wordfreq' package")
        raise RuntimeError("Failed to load vocabulary from wordfreq") from e

    entries = []
    for word in words:
        word = word.strip()
        if not word or any(c in word for c in "\n\r\t\\"):
            continue
        frequency = max(1, round(word_frequency(word, lang) * scale))
        entries.append((word, frequency))

    if verbose:
        logger.info(f"  Loaded {len(entries):,} words from wordfreq")

    return entries
