"""Configuration management for wm."""

import json
import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Python < 3.11

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WMCFG"
DEFAULT_CONFIG_FILE = "wm.toml"
DEFAULT_ROOT = "~/.wm/logs"
DEFAULT_CONTEXT_SIZE = 200


def default_editor() -> str:
    """Pick a program that opens text files without holding the terminal.

    Logs are opened fire-and-forget, so the default is a desktop opener:
    notepad on Windows, open on macOS, xdg-open elsewhere.
    """
    if os.name == "nt":
        return "notepad"
    if sys.platform == "darwin":
        return "open"
    return "xdg-open"


def resolve_config_path() -> Path:
    """Return the config file path from WMCFG, or wm.toml in the working directory."""
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_CONFIG_FILE)


def _toml_str(value: str) -> str:
    # JSON string escapes are valid TOML basic-string escapes.
    return json.dumps(value)


class WmConfig(BaseModel):
    """Settings for a wm invocation.

    Loaded once at startup and passed to each component that needs it.
    """

    root: str = Field(default=DEFAULT_ROOT, description="Root folder for working memory logs")
    editor: str = Field(default_factory=default_editor, description="Program used to edit logs")
    context_size: int = Field(
        default=DEFAULT_CONTEXT_SIZE,
        ge=0,
        description="Characters of context shown on each side of a search match",
    )

    model_config = {"frozen": True, "extra": "ignore"}

    def to_toml_str(self) -> str:
        """Generate TOML configuration string."""
        return f"""root = {_toml_str(self.root)}
editor = {_toml_str(self.editor)}
context_size = {self.context_size}
"""


def write_default_config(path: Path, config: WmConfig | None = None) -> WmConfig:
    """Create a config file holding default settings.

    Args:
        path: Where to write the file
        config: Settings to write (default: WmConfig())

    Returns:
        The settings that were written

    Raises:
        ConfigError: If the file cannot be written
    """
    config = config or WmConfig()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.to_toml_str(), encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"config file not found at '{path}' and failed to create: {e}", path
        ) from e
    logger.info("Created default configuration at %s", path)
    return config


def load_config(path: Path) -> WmConfig:
    """Load settings from a TOML file, creating it with defaults if absent.

    Args:
        path: Path to the configuration file

    Returns:
        WmConfig built from the file; missing keys take defaults

    Raises:
        ConfigError: If the file cannot be read, decoded or validated
    """
    if not path.exists():
        return write_default_config(path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"error decoding configuration file '{path}': {e}", path) from e
    except OSError as e:
        raise ConfigError(f"error reading config file '{path}': {e}", path) from e

    try:
        config = WmConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration in '{path}': {e}", path) from e

    logger.debug("Loaded configuration from %s: %s", path, config)
    return config
