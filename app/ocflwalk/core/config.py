"""Configuration loading.

Settings are read from ``~/.config/ocflwalk/config.toml``. The
``OCFL_ROOT`` environment variable overrides the configured storage
root; command-line options override both.

Example config.toml::

    root = "/srv/ocfl"
    output_format = "table"
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ocflwalk.core.errors import ConfigError
from ocflwalk.core.paths import get_config_path

logger = logging.getLogger(__name__)

ROOT_ENV_VAR = "OCFL_ROOT"

OutputFormatType = Literal["table", "json"]


class Settings(BaseModel):
    """User settings for ocflwalk.

    Attributes:
        root: Default storage root.
        output_format: Default output format of listing commands.
    """

    model_config = ConfigDict(extra="forbid")

    root: Annotated[Path | None, Field(description="Default OCFL storage root")] = None
    output_format: Annotated[
        OutputFormatType, Field(description="Default output format")
    ] = "table"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, applying environment overrides.

    A missing configuration file yields default settings.

    Args:
        path: Path to the configuration file. If None, uses the default path.

    Returns:
        Validated Settings.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or
            does not match the settings schema.
    """
    config_path = path or get_config_path()
    data: dict[str, object] = {}

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read {config_path}: {e}") from e
    else:
        logger.debug("No configuration file at %s", config_path)

    env_root = os.environ.get(ROOT_ENV_VAR)
    if env_root:
        data["root"] = env_root

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
