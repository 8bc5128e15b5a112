"""Unit tests for dictionary loading behavior.

Tests verify dictionary file parsing and wordfreq vocabularies. Each test has a
single assertion and focuses on behavior.
"""

from unittest.mock import MagicMock, patch

import pytest

from delspell.data.dictionary import (
    DictionaryFormatError,
    load_dictionary,
    load_wordfreq_entries,
    parse_dictionary_lines,
)


class TestParseDictionaryLines:
    """Test parse_dictionary_lines behavior."""

    def test_bare_words_default_to_frequency_one(self) -> None:
        """Without has_freq each line is a word counted once."""
        assert list(parse_dictionary_lines(["hello\n", "world\n"])) == [
            ("hello", 1),
            ("world", 1),
        ]

    def test_skips_comment_and_blank_lines(self) -> None:
        """Comments and blank lines produce no entries."""
        assert list(parse_dictionary_lines(["# words\n", "\n", "   \n", "word\n"])) == [
            ("word", 1)
        ]

    def test_reads_frequency_column(self) -> None:
        """With has_freq the second field is the frequency."""
        assert list(parse_dictionary_lines(["hello 100\n"], has_freq=True)) == [("hello", 100)]

    def test_ignores_fields_after_frequency(self) -> None:
        """Extra columns are ignored."""
        assert list(parse_dictionary_lines(["hello 7 noun\n"], has_freq=True)) == [("hello", 7)]

    def test_lowercases_words_when_requested(self) -> None:
        """Lowercase mode normalises the word."""
        assert list(parse_dictionary_lines(["Hello\n"], lowercase=True)) == [("hello", 1)]

    def test_keeps_case_by_default(self) -> None:
        """Words keep their case unless lowercase is requested."""
        assert list(parse_dictionary_lines(["Hello\n"])) == [("Hello", 1)]

    def test_keeps_duplicate_lines(self) -> None:
        """Duplicates are passed through for the store to resolve."""
        assert len(list(parse_dictionary_lines(["a 1", "a 2"], has_freq=True))) == 2

    def test_missing_frequency_raises_format_error(self) -> None:
        """A has_freq line without a frequency is malformed."""
        with pytest.raises(DictionaryFormatError, match="expected 'word frequency'"):
            list(parse_dictionary_lines(["hello\n"], has_freq=True))

    def test_non_integer_frequency_raises_format_error(self) -> None:
        """Frequencies must be integers."""
        with pytest.raises(DictionaryFormatError, match="invalid frequency"):
            list(parse_dictionary_lines(["hello many\n"], has_freq=True))

    def test_negative_frequency_raises_format_error(self) -> None:
        """Frequencies must not be negative."""
        with pytest.raises(DictionaryFormatError, match="negative"):
            list(parse_dictionary_lines(["hello -3\n"], has_freq=True))

    def test_format_error_reports_line_number(self) -> None:
        """The error points at the offending line."""
        with pytest.raises(DictionaryFormatError) as exc_info:
            list(parse_dictionary_lines(["# header", "ok 1", "bad x"], has_freq=True))
        assert exc_info.value.lineno == 3

    def test_format_error_is_a_value_error(self) -> None:
        """Callers can catch format errors as ValueError."""
        with pytest.raises(ValueError):
            list(parse_dictionary_lines(["bad"], has_freq=True))


class TestLoadDictionary:
    """Test load_dictionary behavior."""

    def test_returns_empty_list_when_filepath_is_none(self) -> None:
        """When filepath is None, returns empty list."""
        assert load_dictionary(None) == []

    def test_loads_entries_from_file(self, tmp_path) -> None:
        """When valid file provided, loads its entries."""
        word_file = tmp_path / "words.txt"
        word_file.write_text("hello 100\n# skip\nworld 200\n", encoding="utf-8")
        assert load_dictionary(str(word_file), has_freq=True) == [("hello", 100), ("world", 200)]

    def test_reads_utf8_words(self, tmp_path) -> None:
        """Non-ASCII words are read as UTF-8."""
        word_file = tmp_path / "words.txt"
        word_file.write_text("café\n", encoding="utf-8")
        assert load_dictionary(str(word_file)) == [("café", 1)]

    def test_raises_file_not_found_error(self, tmp_path) -> None:
        """When file doesn't exist, raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_dictionary(str(tmp_path / "missing.txt"))

    def test_raises_format_error_for_bad_frequency(self, tmp_path) -> None:
        """A malformed line aborts the load."""
        word_file = tmp_path / "words.txt"
        word_file.write_text("hello 1\nworld lots\n", encoding="utf-8")
        with pytest.raises(DictionaryFormatError):
            load_dictionary(str(word_file), has_freq=True)

    def test_raises_unicode_decode_error_for_non_utf8(self, tmp_path) -> None:
        """Files must be UTF-8 encoded."""
        word_file = tmp_path / "words.txt"
        word_file.write_bytes(b"\xff\xfe\xfa\n")
        with pytest.raises(UnicodeDecodeError):
            load_dictionary(str(word_file))


class TestLoadWordfreqEntries:
    """Test load_wordfreq_entries behavior."""

    def test_returns_empty_list_without_top_n(self) -> None:
        """When top_n is None, nothing is loaded."""
        assert load_wordfreq_entries(None) == []

    @patch("delspell.data.dictionary.word_frequency")
    @patch("delspell.data.dictionary.top_n_list")
    def test_scales_frequencies_to_integers(
        self, mock_top_n: MagicMock, mock_frequency: MagicMock
    ) -> None:
        """wordfreq proportions become integer counts."""
        mock_top_n.return_value = ["the"]
        mock_frequency.return_value = 0.05
        assert load_wordfreq_entries(1, scale=1000) == [("the", 50)]

    @patch("delspell.data.dictionary.word_frequency")
    @patch("delspell.data.dictionary.top_n_list")
    def test_rare_words_get_frequency_one(
        self, mock_top_n: MagicMock, mock_frequency: MagicMock
    ) -> None:
        """A frequency that rounds to zero is raised to one."""
        mock_top_n.return_value = ["zyzzyva"]
        mock_frequency.return_value = 0.0
        assert load_wordfreq_entries(1) == [("zyzzyva", 1)]

    @patch("delspell.data.dictionary.word_frequency")
    @patch("delspell.data.dictionary.top_n_list")
    def test_requests_top_n_words(self, mock_top_n: MagicMock, mock_frequency: MagicMock) -> None:
        """The requested count and language are passed to wordfreq."""
        mock_top_n.return_value = []
        mock_frequency.return_value = 0.0
        load_wordfreq_entries(25, lang="de")
        mock_top_n.assert_called_once_with("de", 25)

    @patch("delspell.data.dictionary.top_n_list")
    def test_raises_runtime_error_when_library_fails(self, mock_top_n: MagicMock) -> None:
        """When wordfreq fails, raises RuntimeError."""
        mock_top_n.side_effect = Exception("Library error")
        with pytest.raises(RuntimeError, match="Failed to load vocabulary"):
            load_wordfreq_entries(10)
