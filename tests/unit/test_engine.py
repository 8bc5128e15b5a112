"""Unit tests for the SymSpell lookup engine.

Each test has exactly one assertion.
"""

import pytest

from delspell.core.types import Suggestion, Verbosity
from delspell.engine import SymSpell
from delspell.storage import FrozenStore, ReadOnlyStoreError, build_snapshot, write_snapshot

ENTRIES = [("hello", 100), ("hell", 50), ("help", 10), ("world", 200)]

RUNTIME_ENTRIES = [
    ("hello", 3),
    ("hell", 1),
    ("help", 1),
    ("world", 5),
    ("test", 2),
    ("tost", 4),
    ("applied", 1),
    ("apple", 2),
    ("apply", 1),
]


@pytest.fixture
def engine() -> SymSpell:
    """Mutable engine at distance 2 holding a few similar words."""
    sym = SymSpell(2)
    sym.load_batch(ENTRIES)
    return sym


@pytest.fixture
def frozen_engine() -> SymSpell:
    """Frozen engine built from a larger batch."""
    return SymSpell.from_entries(2, RUNTIME_ENTRIES)


class TestLookup:
    """Test lookups through the mutable engine."""

    def test_closest_finds_hello_for_helo(self, engine: SymSpell) -> None:
        """'helo' is one edit from 'hello'."""
        assert Suggestion("hello", 100, 1) in engine.lookup("helo", 2, Verbosity.CLOSEST)

    def test_top_returns_most_frequent_closest_word(self, engine: SymSpell) -> None:
        """Among equally close words the most frequent wins."""
        assert engine.lookup("helo", 2, Verbosity.TOP) == [Suggestion("hello", 100, 1)]

    def test_exact_match_returns_stored_frequency_at_distance_zero(self, engine: SymSpell) -> None:
        """A dictionary word looks itself up."""
        assert engine.lookup("world", 2, Verbosity.TOP) == [Suggestion("world", 200, 0)]

    def test_exact_match_dominates_more_frequent_neighbours(self) -> None:
        """Distance 0 wins over a more frequent word at distance 1."""
        sym = SymSpell(2)
        sym.load_batch([("hello", 1), ("hell", 1000)])
        assert sym.lookup("hello", 2, Verbosity.TOP)[0].term == "hello"

    def test_transposition_counts_as_one_edit(self, engine: SymSpell) -> None:
        """'wrold' is a single transposition away from 'world'."""
        assert engine.lookup("wrold", 1, Verbosity.TOP) == [Suggestion("world", 200, 1)]

    @pytest.mark.parametrize("verbosity", list(Verbosity))
    def test_empty_term_gives_empty_result(self, engine: SymSpell, verbosity: Verbosity) -> None:
        """Empty queries return nothing under every verbosity."""
        assert engine.lookup("", 2, verbosity) == []

    def test_unmatched_term_gives_empty_result(self, engine: SymSpell) -> None:
        """Nothing within distance means no suggestions."""
        assert engine.lookup("xyzzyq", 2, Verbosity.ALL) == []

    def test_all_never_exceeds_requested_distance(self, engine: SymSpell) -> None:
        """Results respect a requested distance below the engine's."""
        results = engine.lookup("hel", 1, Verbosity.ALL)
        assert all(s.distance <= 1 for s in results)

    def test_all_orders_by_distance_then_frequency(self, engine: SymSpell) -> None:
        """ALL lists closer words first, then more frequent ones."""
        results = engine.lookup("hel", 2, Verbosity.ALL)
        assert [s.term for s in results] == ["hell", "help", "hello"]

    def test_closest_matches_minimum_distance_of_all(self, engine: SymSpell) -> None:
        """Every CLOSEST result sits at the minimum distance present in ALL."""
        minimum = min(s.distance for s in engine.lookup("hep", 2, Verbosity.ALL))
        assert {s.distance for s in engine.lookup("hep", 2, Verbosity.CLOSEST)} == {minimum}

    def test_repeated_lookups_are_identical(self, engine: SymSpell) -> None:
        """Lookups do not change state."""
        assert engine.lookup("helo", 2, Verbosity.ALL) == engine.lookup("helo", 2, Verbosity.ALL)

    def test_top_tie_is_deterministic(self) -> None:
        """Equally close, equally frequent words resolve by term order."""
        sym = SymSpell(1)
        sym.load_batch([("abe", 5), ("abd", 5)])
        assert sym.lookup("abc", 1, Verbosity.TOP)[0].term == "abd"

    def test_accepts_string_verbosity(self, engine: SymSpell) -> None:
        """Verbosity may be given by name."""
        assert len(engine.lookup("helo", 2, "closest")) == 3

    def test_default_distance_is_engine_distance(self, engine: SymSpell) -> None:
        """Omitting the distance searches the full indexed depth."""
        assert engine.lookup("hlo", verbosity=Verbosity.TOP)[0].term == "hello"

    def test_negative_distance_raises_value_error(self, engine: SymSpell) -> None:
        """Negative distances are rejected."""
        with pytest.raises(ValueError, match="max_distance"):
            engine.lookup("helo", -1)


class TestDistanceCap:
    """Test that requested distances are capped to the indexed depth."""

    def test_requested_distance_above_engine_is_capped(self) -> None:
        """'hlo' is two edits from 'hello' and stays hidden from a distance-1 engine."""
        sym = SymSpell(1)
        sym.load("hello", 1)
        assert sym.lookup("hlo", 5, Verbosity.ALL) == []

    def test_word_is_found_when_engine_indexes_deep_enough(self) -> None:
        """The same query succeeds at distance 2."""
        sym = SymSpell(2)
        sym.load("hello", 1)
        assert sym.lookup("hlo", 2, Verbosity.ALL) == [Suggestion("hello", 1, 2)]


class TestLoading:
    """Test the two duplicate-word policies."""

    def test_incremental_load_keeps_last_frequency(self) -> None:
        """Loading a word twice keeps the last frequency."""
        sym = SymSpell(2)
        sym.load("apple", 2)
        sym.load("apple", 3)
        assert sym.frequency_of("apple") == 3

    def test_batch_build_sums_frequencies(self) -> None:
        """Building from a batch sums duplicate frequencies."""
        sym = SymSpell.from_entries(2, [("apple", 2), ("apple", 3)])
        assert sym.frequency_of("apple") == 5

    def test_load_batch_sums_duplicate_frequencies(self) -> None:
        """Duplicates inside one batch have their frequencies summed."""
        sym = SymSpell(2)
        sym.load_batch([("apple", 2), ("apple", 3)])
        assert sym.frequency_of("apple") == 5

    def test_load_batch_counts_duplicates_once(self) -> None:
        """A word repeated in a batch is counted as one loaded word."""
        assert SymSpell(2).load_batch([("apple", 2), ("apple", 3), ("pear", 1)]) == 2

    def test_load_after_load_batch_overwrites(self) -> None:
        """A single load still replaces the frequency a batch set."""
        sym = SymSpell(2)
        sym.load_batch([("apple", 2), ("apple", 3)])
        sym.load("apple", 7)
        assert sym.frequency_of("apple") == 7

    def test_load_batch_negative_frequency_raises(self) -> None:
        """Negative frequencies are rejected."""
        with pytest.raises(ValueError):
            SymSpell(2).load_batch([("apple", -1)])

    def test_load_batch_counts_loaded_entries(self) -> None:
        """Empty words are skipped and not counted."""
        assert SymSpell(2).load_batch([("a", 1), ("", 1), ("b", 2)]) == 2

    def test_load_default_frequency_is_one(self) -> None:
        """Words loaded without a frequency count once."""
        sym = SymSpell(2)
        sym.load("word")
        assert sym.frequency_of("word") == 1

    def test_load_on_frozen_engine_raises(self, frozen_engine: SymSpell) -> None:
        """Frozen engines refuse new words."""
        with pytest.raises(ReadOnlyStoreError):
            frozen_engine.load("new", 1)

    def test_load_batch_on_frozen_engine_raises(self, frozen_engine: SymSpell) -> None:
        """Frozen engines refuse batches too."""
        with pytest.raises(ReadOnlyStoreError):
            frozen_engine.load_batch([("new", 1)])

    def test_unknown_word_has_no_frequency(self, engine: SymSpell) -> None:
        """Unknown words have no frequency."""
        assert engine.frequency_of("unknown") is None


class TestFrozenEngine:
    """Test lookups through a batch-built engine."""

    def test_closest_returns_both_apple_and_apply(self, frozen_engine: SymSpell) -> None:
        """'appl' is one edit from both 'apple' and 'apply'."""
        terms = {s.term for s in frozen_engine.lookup("appl", 2, Verbosity.CLOSEST)}
        assert {"apple", "apply"} <= terms

    def test_all_includes_test_for_teso(self, frozen_engine: SymSpell) -> None:
        """'teso' is one substitution from 'test'."""
        assert "test" in {s.term for s in frozen_engine.lookup("teso", 2, Verbosity.ALL)}

    def test_find_top_returns_single_suggestion(self, frozen_engine: SymSpell) -> None:
        """find_top returns the best suggestion directly."""
        assert frozen_engine.find_top("helo") == Suggestion("hello", 3, 1)

    def test_find_top_returns_none_without_match(self, frozen_engine: SymSpell) -> None:
        """find_top returns None when nothing is close."""
        assert frozen_engine.find_top("qqqqqq") is None

    def test_find_closest_matches_lookup(self, frozen_engine: SymSpell) -> None:
        """find_closest is lookup with CLOSEST at full distance."""
        assert frozen_engine.find_closest("tesd") == frozen_engine.lookup(
            "tesd", 2, Verbosity.CLOSEST
        )

    def test_find_all_matches_lookup(self, frozen_engine: SymSpell) -> None:
        """find_all is lookup with ALL at full distance."""
        assert frozen_engine.find_all("tesd") == frozen_engine.lookup("tesd", 2, Verbosity.ALL)

    def test_len_counts_words(self, frozen_engine: SymSpell) -> None:
        """len() is the number of dictionary words."""
        assert len(frozen_engine) == len(RUNTIME_ENTRIES)

    def test_contains_dictionary_word(self, frozen_engine: SymSpell) -> None:
        """Dictionary words are members of the engine."""
        assert "tost" in frozen_engine


class TestConstruction:
    """Test engine construction."""

    def test_store_distance_must_match_engine(self) -> None:
        """A store indexed at another depth is rejected."""
        with pytest.raises(ValueError, match="max distance"):
            SymSpell(2, FrozenStore.build(1, ENTRIES))

    def test_expansion_limit_must_be_positive(self) -> None:
        """At least one probe must be allowed."""
        with pytest.raises(ValueError, match="expansion_limit"):
            SymSpell(2, expansion_limit=0)

    def test_from_snapshot_serves_same_results(self, tmp_path) -> None:
        """A snapshot-backed engine answers like a freshly built one."""
        path = tmp_path / "words.yml"
        write_snapshot(build_snapshot(RUNTIME_ENTRIES, 2), path)
        restored = SymSpell.from_snapshot(path)
        built = SymSpell.from_entries(2, RUNTIME_ENTRIES)
        assert restored.lookup("testo", 2, Verbosity.ALL) == built.lookup(
            "testo", 2, Verbosity.ALL
        )
