"""Shared file helpers."""

import os
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | Path | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(str(filepath))


def ensure_directory_exists(dir_path: str | Path) -> None:
    """Create directory if it doesn't exist.

    Raises:
        PermissionError: If directory creation is denied
        OSError: If directory creation fails for other OS-related reasons
    """
    dir_str = str(dir_path)
    try:
        os.makedirs(dir_str, exist_ok=True)
    except PermissionError:
        logger.error(f"✗ Permission denied creating directory: {dir_str}")
        logger.error("  Please check directory permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error creating directory {dir_str}: {e}")
        raise


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Write to a file with consistent error handling.

    Args:
        file_path: Path to the file to write
        content_writer: Callable that takes a file handle and writes content
        operation_name: Description of the operation for error messages
    """
    file_str = str(file_path)
    try:
        parent_dir = os.path.dirname(file_str) or "."
        ensure_directory_exists(parent_dir)

        with open(file_str, "w", encoding="utf-8") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ Permission denied {operation_name}: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error {operation_name} {file_str}: {e}")
        raise
