"""Resolve gallery configuration from config.yaml merged over built-in defaults."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from folio.core.emit import OutputWriteError
from folio.core.shapes import GalleryConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"


class ConfigError(Exception):
    """Exception raised when an existing configuration file cannot be used."""

    pass


class ConfigReadError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


def _read_config_data(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Error reading configuration file {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Error parsing configuration file {path}: {e}") from e

    # An empty document is an empty mapping
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Error parsing configuration file {path}: "
            f"expected a mapping at the top level, got {type(data).__name__}"
        )

    return data


def load_config(path: str | Path = CONFIG_FILENAME) -> GalleryConfig:
    """Load configuration from a YAML file, falling back to defaults.

    Every key present in the file overrides the matching default; keys that are
    absent (or explicitly null) keep their default values. A missing file is not
    an error, but a file that exists and cannot be read or parsed is.

    Args:
        path: Path to the configuration file.

    Raises:
        ConfigReadError: The file exists but could not be read.
        ConfigParseError: The file is not valid YAML or has the wrong shape.
    """
    path = Path(path)

    if not path.exists():
        logger.info(f"No config file {path.name}, using defaults.")
        return GalleryConfig()

    data = _read_config_data(path)
    overrides = {key: value for key, value in data.items() if value is not None}

    try:
        config = GalleryConfig.model_validate(overrides)
    except ValidationError as e:
        raise ConfigParseError(f"Error parsing configuration file {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}: {config.model_dump()}")
    return config


def default_config_yaml() -> str:
    return yaml.safe_dump(GalleryConfig().model_dump(), sort_keys=False)


def write_default_config(path: str | Path = CONFIG_FILENAME) -> Path:
    """Write the default configuration to ``path``, replacing any existing file."""
    path = Path(path)

    try:
        path.write_text(default_config_yaml(), encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(
            f"Error writing default configuration file {path}: {e}"
        ) from e

    return path
