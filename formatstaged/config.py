"""Configuration management for formatstaged.

Settings are read from two YAML files, the repository one taking precedence:
- ~/.formatstaged/config.yaml: user-wide defaults
- <repo>/.formatstaged/config.yaml: per-repository settings

Neither file is ever created automatically.
"""

import shlex
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from formatstaged.engine.errors import ConfigError


_CONFIG_DIR_NAME = ".formatstaged"
_CONFIG_FILE_NAME = "config.yaml"


class FormatStagedConfig(BaseModel):
    """Effective formatstaged settings."""

    command: list[str] = []  # Default formatter argv when none is given
    debug: bool = False

    @field_validator("command", mode="before")
    @classmethod
    def split_command_string(cls, value: Union[str, list, None]) -> Any:
        """Accept ``command: "prettier --write"`` as well as a list."""
        if value is None:
            return []
        if isinstance(value, str):
            return shlex.split(value)
        return value


def get_global_config_file() -> Path:
    """Get path to the user-wide config file.

    Returns:
        Path to ~/.formatstaged/config.yaml
    """
    return Path.home() / _CONFIG_DIR_NAME / _CONFIG_FILE_NAME


def get_repo_config_file(repo_root: Path) -> Path:
    """Get path to the repository config file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to <repo>/.formatstaged/config.yaml
    """
    return repo_root / _CONFIG_DIR_NAME / _CONFIG_FILE_NAME


def _load_yaml(config_file: Path) -> Dict[str, Any]:
    """Load one YAML config file. A missing file yields an empty dict."""
    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config in {config_file}: expected a mapping")
    return data


def load_config(repo_root: Optional[Path] = None) -> FormatStagedConfig:
    """Load the effective configuration.

    Args:
        repo_root: The root directory of the git repository (optional).

    Returns:
        The merged configuration; defaults where nothing is set.

    Raises:
        ConfigError: If a config file is unreadable or invalid.
    """
    merged: Dict[str, Any] = {}
    sources = [get_global_config_file()]
    if repo_root is not None:
        sources.append(get_repo_config_file(repo_root))

    for config_file in sources:
        merged.update(_load_yaml(config_file))

    try:
        return FormatStagedConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")
