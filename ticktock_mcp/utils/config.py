"""
Configuration loading for the Clockify MCP server.

Settings come from environment variables, falling back to a JSON file at
~/.config/ticktock-mcp/config.json. A non-empty environment variable always
wins over the file.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR = "ticktock-mcp"
CONFIG_FILE = "config.json"

# setting name -> environment variable
ENV_VARS = {
    "api_key": "CLOCKIFY_API_KEY",
    "workspace_id": "CLOCKIFY_WORKSPACE_ID",
    "base_url": "CLOCKIFY_BASE_URL",
    "reports_url": "CLOCKIFY_REPORTS_URL",
}


class ConfigError(Exception):
    """Raised when the server cannot be configured."""


class Config(BaseModel):
    """Immutable server configuration."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    api_key: str
    workspace_id: Optional[str] = None
    base_url: Optional[str] = None
    reports_url: Optional[str] = None


def default_config_path() -> Path:
    return Path.home() / ".config" / CONFIG_DIR / CONFIG_FILE


def _load_from_file(path: Path) -> Dict[str, Any]:
    """Read the config file; a missing or malformed file yields no settings."""
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring invalid config file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring invalid config file {path}: expected a JSON object")
        return {}

    return {key: data[key] for key in ENV_VARS if data.get(key)}


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from the environment with file fallback.

    Args:
        path: Config file to read; defaults to ~/.config/ticktock-mcp/config.json

    Returns:
        Config: The resolved configuration

    Raises:
        ConfigError: If no API key is configured
    """
    config_path = path or default_config_path()
    values = _load_from_file(config_path)

    for key, env_var in ENV_VARS.items():
        value = os.getenv(env_var)
        if value:
            values[key] = value

    if not values.get("api_key"):
        raise ConfigError(
            f"CLOCKIFY_API_KEY not set (use env variable or ~/.config/{CONFIG_DIR}/{CONFIG_FILE})"
        )

    try:
        return Config(**values)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
