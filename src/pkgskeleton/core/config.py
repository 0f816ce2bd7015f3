"""
User configuration for pkgskeleton.

Settings are read from a TOML file. Location, first match wins:

    1. explicit path (``--config``)
    2. PKGSKELETON_CONFIG environment variable
    3. $XDG_CONFIG_HOME/pkgskeleton/config.toml (default ~/.config/...)

Example:

    template = "default"
    template_dirs = ["~/skeletons"]
    git_init = true
    overwrite_uncommitted = false

    [values]
    GHUSER = "someone"
    LICENSE = "MIT"
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .template import DEFAULT_TEMPLATE

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PKGSKELETON_CONFIG"
CONFIG_FILE = "config.toml"


class SkeletonConfig(BaseModel):
    """Validated contents of the configuration file."""

    template: str = DEFAULT_TEMPLATE
    template_dirs: list[Path] = Field(default_factory=list)
    git_init: bool = True
    overwrite_uncommitted: bool = False
    values: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("template_dirs")
    @classmethod
    def expand_user(cls, dirs: list[Path]) -> list[Path]:
        return [d.expanduser() for d in dirs]

    @field_validator("values", mode="before")
    @classmethod
    def stringify_values(cls, values: object) -> object:
        # TOML integers (e.g. YEAR = 2020) are accepted as strings
        if isinstance(values, dict):
            return {k: v if isinstance(v, str) else str(v) for k, v in values.items()}
        return values


def default_config_path() -> Path:
    """Path of the per-user configuration file."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "pkgskeleton" / CONFIG_FILE


def load_config(path: Path | None = None) -> SkeletonConfig:
    """
    Load the configuration file.

    A missing file at the default location yields defaults; a missing file
    that was asked for explicitly is an error.

    Raises:
        ConfigError: If the file is missing (explicit path), unreadable,
            not valid TOML, or does not match the schema
    """
    explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else default_config_path()
    path = path.expanduser()

    if not path.exists():
        if explicit:
            raise ConfigError("Configuration file not found", path)
        return SkeletonConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read configuration ({e.strerror})", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in configuration ({e})", path) from e

    try:
        config = SkeletonConfig.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration ({errors})", path) from e

    logger.debug("Loaded configuration from %s", path)
    return config
