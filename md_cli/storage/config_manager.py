"""
Manages loading and validation of the optional INI settings file.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from md_cli.exceptions import ConfigurationError
from md_cli.models.config import Settings

log = logging.getLogger(__name__)

FORMATS_SECTION = "formats"


class ConfigManager:
    """Handles all operations related to the application's INI settings file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_settings(self) -> Settings:
        """
        Loads settings from the INI file and validates them.

        A missing file is not an error: the defaults are used.

        Raises:
            ConfigurationError: If the file cannot be parsed or validation fails.
        """
        if not self.config_file_path.is_file():
            log.debug(f"No settings file at '{self.config_file_path}', using defaults.")
            return Settings()

        try:
            self._parser.read(self.config_file_path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Error parsing settings file: {e}") from e

        unknown = set(self._parser.sections()) - {FORMATS_SECTION}
        if unknown:
            raise ConfigurationError(
                f"Unknown section(s) in '{self.config_file_path}': "
                f"{', '.join(sorted(unknown))}"
            )

        try:
            settings = Settings(**self._get_settings_as_dict())
        except ValidationError as e:
            raise ConfigurationError(f"Settings validation failed:\n{e}") from e

        log.debug(f"Loaded settings from '{self.config_file_path}'.")
        return settings

    def _get_settings_as_dict(self) -> dict[str, Any]:
        settings: dict[str, Any] = dict(self._parser.defaults())
        if self._parser.has_section(FORMATS_SECTION):
            defaults = self._parser.defaults()
            settings["format_selectors"] = {
                key: value
                for key, value in self._parser.items(FORMATS_SECTION)
                if key not in defaults
            }
        return settings
