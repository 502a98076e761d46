"""
Configuration loader — reads drupal-setup.yml into InstallerConfig.

The file is optional. Without it the installer runs with the stock
defaults baked into ``InstallerConfig``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from drupal_setup.core.models.config import InstallerConfig

logger = logging.getLogger(__name__)

# Default config filename
INSTALLER_CONFIG_FILE = "drupal-setup.yml"


class ConfigError(Exception):
    """Raised when installer configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Look for drupal-setup.yml in the given directory (default: cwd).

    The installer creates the project *below* the directory it runs in,
    so there is no upward search.
    """
    candidate = (start_dir or Path.cwd()) / INSTALLER_CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config(path: Path | None = None) -> InstallerConfig:
    """Load and validate installer configuration.

    Args:
        path: Explicit path to a config file. If None, looks in the
            current directory and falls back to defaults.

    Returns:
        Validated InstallerConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is
            unreadable, not YAML, not a mapping, or fails validation.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", INSTALLER_CONFIG_FILE)
            return InstallerConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading installer config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return InstallerConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = InstallerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid installer configuration: {e}") from e

    logger.info(
        "Loaded config from %s (%d packages, %d modules)",
        path,
        len(config.packages),
        len(config.modules),
    )
    return config
