"""YAML configuration loading for framecast.

A config file holds one mapping per settings section::

    render:
      fps: 30
    fade:
      in_frames: 12

Values from the file are passed to the section models as init arguments,
so they win over ``FRAMECAST_<SECTION>_*`` environment variables. Sections
missing from the file are read from the environment alone.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

from framecast.errors import ConfigurationError

from .settings import (
    DiagnosticsSettings,
    FadeSettings,
    RenderSettings,
    Settings,
    SpringSettings,
)

logger = logging.getLogger(__name__)

# Searched in order; the first existing file wins
DEFAULT_CONFIG_FILES = ["framecast.yaml", "framecast.yml", "config.yaml", "config.yml"]

SECTIONS: dict[str, type[BaseSettings]] = {
    "render": RenderSettings,
    "fade": FadeSettings,
    "spring": SpringSettings,
    "diagnostics": DiagnosticsSettings,
}


class ConfigLoader:
    """Locates a YAML config file and turns it into :class:`Settings`."""

    def __init__(self, config_path: Path | str | None = None) -> None:
        """Initialize the config loader.

        Args:
            config_path: Explicit config file. If None, the default names are
                searched for in the working directory.
        """
        self.config_path = Path(config_path) if config_path else None
        self._document: dict[str, Any] | None = None

    def find_config_file(self, search_dir: Path | None = None) -> Path | None:
        """Return the config file to use, or None if there is none.

        An explicit ``config_path`` must exist; default names are optional.

        Raises:
            ConfigurationError: If an explicit ``config_path`` is missing.
        """
        if self.config_path is not None:
            if not self.config_path.is_file():
                raise ConfigurationError(f"Config file not found: {self.config_path}")
            return self.config_path

        directory = search_dir or Path.cwd()
        return next(
            (directory / name for name in DEFAULT_CONFIG_FILES if (directory / name).is_file()),
            None,
        )

    def load_yaml_config(self, path: Path | None = None) -> dict[str, Any]:
        """Parse the config file into a mapping of section name to values.

        The parsed document is cached on the loader.

        Raises:
            ConfigurationError: If the document or one of its sections is
                not a mapping.
        """
        if self._document is not None:
            return self._document

        config_file = path or self.find_config_file()
        if config_file is None:
            logger.debug("No config file found, using environment and defaults")
            self._document = {}
            return self._document

        with open(config_file, encoding="utf-8") as f:
            document = yaml.safe_load(f) or {}

        if not isinstance(document, dict):
            raise ConfigurationError(
                f"{config_file}: expected a mapping of sections, "
                f"got {type(document).__name__}"
            )
        for name, values in document.items():
            if name not in SECTIONS:
                logger.warning(
                    "%s: ignoring unknown section %r (known: %s)",
                    config_file,
                    name,
                    ", ".join(SECTIONS),
                )
            elif values is not None and not isinstance(values, dict):
                raise ConfigurationError(
                    f"{config_file}: section {name!r} must be a mapping"
                )

        logger.debug("Loaded config file %s", config_file)
        self._document = document
        return self._document

    def load_settings(self, config_path: Path | str | None = None) -> Settings:
        """Build :class:`Settings` from the config file and environment.

        Args:
            config_path: Overrides the path given at construction.

        Raises:
            ConfigurationError: On a missing explicit file or malformed YAML
                structure.
            pydantic.ValidationError: If a value breaks a field constraint.
        """
        if config_path:
            self.config_path = Path(config_path)
            self._document = None

        document = self.load_yaml_config()
        sections = {
            name: model(**(document.get(name) or {}))
            for name, model in SECTIONS.items()
        }
        return Settings(**sections)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from ``config_path`` or the default config file."""
    return ConfigLoader(config_path).load_settings()
