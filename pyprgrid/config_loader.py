"""Configuration file loading utilities.

This module handles loading, parsing and validating the TOML configuration.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles
import aiofiles.os

from .config import Configuration
from .constants import CONFIG_FILE
from .models import PyprError
from .schema import CONFIG_SCHEMA, activity_name_warnings
from .validation import ConfigValidator

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading and validating the configuration file.

    A missing file is not an error: every option has a default.
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log

    async def load(self, config_filename: str | Path = "") -> Configuration:
        """Load configuration from file.

        Args:
            config_filename: Optional path to the config file.
                           If empty, uses default CONFIG_FILE location.

        Returns:
            The validated configuration, with schema defaults.

        Raises:
            PyprError: If the file has syntax errors.
        """
        fname = Path(os.path.expandvars(config_filename)).expanduser() if config_filename else CONFIG_FILE
        raw = await self._load_config_file(fname)
        return self.validate(raw, section=fname.name)

    async def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single configuration file.

        Args:
            fname: Path to the configuration file

        Returns:
            Configuration dictionary, empty if the file doesn't exist

        Raises:
            PyprError: If the file has syntax errors
        """
        if not await aiofiles.os.path.exists(fname):
            self.log.info("%s not found, using defaults", fname)
            return {}
        self.log.info("Loading %s", fname)
        async with aiofiles.open(fname, "rb") as f:
            data = await f.read()
        try:
            return tomllib.loads(data.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            self.log.critical("Problem reading %s: %s", fname, e)
            raise PyprError from e

    def validate(self, raw: dict[str, Any], section: str = "config") -> Configuration:
        """Check `raw` against the schema, dropping rejected values so their defaults apply.

        Args:
            raw: Parsed configuration
            section: Name shown in the error messages

        Returns:
            The configuration object
        """
        validator = ConfigValidator(raw, section, self.log)
        for error in validator.validate(CONFIG_SCHEMA):
            self.log.error(error)
        validator.warn_unknown_keys(CONFIG_SCHEMA)
        sane = {k: v for k, v in raw.items() if k not in validator.invalid_fields}
        config = Configuration(sane, logger=self.log, schema=CONFIG_SCHEMA)
        for warning in activity_name_warnings(config.get_list("activities")):
            self.log.warning(warning)
        return config
