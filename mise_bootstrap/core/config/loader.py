"""
Configuration loader — reads bootstrap.yml into BootstrapConfig.

The file is optional: without one every default applies. When present
it is read as YAML, validated against the Pydantic schema, and
returned as a typed model.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from mise_bootstrap.core.models.config import BootstrapConfig

logger = logging.getLogger(__name__)

# Default config filename
BOOTSTRAP_CONFIG_FILE = "bootstrap.yml"


class ConfigError(Exception):
    """Raised when bootstrap configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Look for bootstrap.yml in the given directory (default: cwd).

    No upward search: the bootstrap always operates on the project in
    the current directory.
    """
    candidate = (start_dir or Path.cwd()).resolve() / BOOTSTRAP_CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config(path: Path | None = None) -> BootstrapConfig:
    """Load and validate bootstrap configuration.

    Args:
        path: Explicit path to a config file. If None, looks for
            bootstrap.yml in the working directory and falls back to
            defaults when there is none.

    Returns:
        Validated BootstrapConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is
            unreadable or invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", BOOTSTRAP_CONFIG_FILE)
            return BootstrapConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading bootstrap config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return BootstrapConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may sit under a "bootstrap" key or be flat
    config_data = data.get("bootstrap", data)

    try:
        config = BootstrapConfig.model_validate(config_data)
    except Exception as e:
        raise ConfigError(f"Invalid bootstrap configuration: {e}") from e

    logger.info("Loaded bootstrap config from %s", path)
    return config
