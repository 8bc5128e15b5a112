"""Configuration management for delspell."""

from __future__ import annotations

import json
from argparse import ArgumentParser

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from delspell.core.types import Verbosity
from delspell.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for building a lookup engine and running queries."""

    # Vocabulary sources
    dictionary: str | None = Field(None, description="Dictionary file, one word per line")
    has_freq: bool = Field(False, description="Dictionary lines are 'word frequency'")
    lowercase: bool = Field(False, description="Lowercase dictionary words")
    top_n: int | None = Field(None, ge=1, description="Top N words from wordfreq")
    snapshot: str | None = Field(None, description="Prebuilt snapshot to load")

    # Lookup
    max_distance: int = Field(
        Constants.DEFAULT_MAX_DISTANCE, ge=0, le=Constants.MAX_DISTANCE_VALUE
    )
    verbosity: Verbosity = Verbosity.TOP
    expansion_limit: int = Field(Constants.EXPANSION_LIMIT, ge=1)
    terms: list[str] = Field(default_factory=list)

    # Snapshot building
    build_snapshot: str | None = Field(None, description="Write a snapshot here and exit")
    max_deletes: int = Field(Constants.DEFAULT_MAX_DELETES, ge=0, description="0 = unlimited")

    # Logging
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("verbosity", mode="before")
    @classmethod
    def parse_verbosity(cls, v):
        """Accept verbosity names in any case."""
        if v is None:
            return Verbosity.TOP
        return Verbosity.parse(v)

    @field_validator("terms", mode="before")
    @classmethod
    def parse_terms(cls, v):
        """Accept a list or a comma-separated string of terms."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if not (self.dictionary or self.top_n or self.snapshot):
            raise ValueError("A vocabulary is required: set dictionary, top_n or snapshot")
        if self.snapshot and self.build_snapshot:
            raise ValueError("snapshot and build_snapshot cannot be used together")
        if self.snapshot and (self.dictionary or self.top_n):
            raise ValueError("snapshot cannot be combined with dictionary or top_n")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "dictionary": get_value("dictionary", None),
        "has_freq": cli_args.has_freq or json_config.get("has_freq", False),
        "lowercase": cli_args.lowercase or json_config.get("lowercase", False),
        "top_n": get_value("top_n", None),
        "snapshot": get_value("snapshot", None),
        "max_distance": get_value("max_distance", Constants.DEFAULT_MAX_DISTANCE),
        "verbosity": get_value("verbosity", Verbosity.TOP.value),
        "expansion_limit": get_value("expansion_limit", Constants.EXPANSION_LIMIT),
        "terms": cli_args.terms or json_config.get("terms", []),
        "build_snapshot": get_value("build_snapshot", None),
        "max_deletes": get_value("max_deletes", Constants.DEFAULT_MAX_DELETES),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
