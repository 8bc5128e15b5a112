"""Command-line interface for delspell."""

from delspell.cli.parser import create_parser

__all__ = ["create_parser"]
