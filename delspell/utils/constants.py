"""Shared constants for delspell."""


class Constants:
    """Tunable limits and file-format markers."""

    # Lookup
    DEFAULT_MAX_DISTANCE = 2
    MAX_DISTANCE_VALUE = 255  # distances are clamped to this value
    EXPANSION_LIMIT = 10_000  # safety valve on query deletion probes

    # Dictionary files
    COMMENT_PREFIX = "#"
    DEFAULT_FREQUENCY = 1

    # wordfreq vocabulary
    WORDFREQ_SCALE = 1_000_000_000

    # Snapshots
    SNAPSHOT_FORMAT = "delspell-snapshot"
    SNAPSHOT_VERSION = 1
    DEFAULT_MAX_DELETES = 100_000
