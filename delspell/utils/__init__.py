"""Utility functions for delspell."""

from delspell.utils.constants import Constants
from delspell.utils.helpers import ensure_directory_exists, expand_file_path, write_file_safely
from delspell.utils.logging import add_log_file_handler, is_debug_enabled, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "ensure_directory_exists",
    "expand_file_path",
    "is_debug_enabled",
    "setup_logger",
    "write_file_safely",
]
