"""
Configuration loader — reads an optional YAML file into InstallerConfig.

Nothing is read unless a path is given explicitly (``--config``) or
through ``APPIUM_INSTALLER_CONFIG``. Without either, the built-in
defaults apply.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from appium_installer.core.models.config import InstallerConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "APPIUM_INSTALLER_CONFIG"


class ConfigError(Exception):
    """Raised when the installer configuration is invalid or missing."""


def resolve_config_path(path: Path | None = None) -> Path | None:
    """Return the explicit path, else the env var path, else None."""
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else None


def load_config(path: Path | None = None) -> InstallerConfig:
    """Load and validate installer configuration.

    Args:
        path: Explicit path to a YAML file. If None, falls back to
            ``APPIUM_INSTALLER_CONFIG``, then to defaults.

    Returns:
        Validated InstallerConfig.

    Raises:
        ConfigError: If a named file is missing or invalid.
    """
    path = resolve_config_path(path)
    if path is None:
        return InstallerConfig()

    if not path.is_file():
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
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may sit under an "installer" key or at the top level
    if "installer" in data:
        data = data["installer"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping under 'installer' in {path}")

    try:
        config = InstallerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid installer configuration: {e}") from e

    logger.info("Loaded installer config from %s", path)
    return config
