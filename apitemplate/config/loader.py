"""Layered TOML configuration files.

Files live in a single config directory: ``$APITEMPLATE_CONFIG_DIR`` when
set, otherwise ``./config``. Both ``default.toml`` and the per-environment
file are optional, since a library embedded in another project often ships
no configuration of its own.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "APITEMPLATE_CONFIG_DIR"
ENVIRONMENT_ENV = "APITEMPLATE_ENV"
DEFAULT_ENVIRONMENT = "development"


def get_config_dir() -> Path:
    """Return the directory holding configuration files.

    Raises:
        FileNotFoundError: If APITEMPLATE_CONFIG_DIR names a missing directory
    """
    configured = os.environ.get(CONFIG_DIR_ENV)
    if not configured:
        return Path.cwd() / "config"

    path = Path(configured)
    if not path.is_dir():
        raise FileNotFoundError(f"Config directory not found: {configured}")
    return path


def get_environment() -> str:
    """Name of the environment overlay file, without '.toml'."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Read one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, recursing into tables."""
    result = base.copy()
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Merge default.toml with the current environment's overlay.

    Missing files contribute nothing, so an absent config directory yields
    an empty dictionary.
    """
    config_dir = get_config_dir()
    config: dict[str, Any] = {}
    for name in ("default", get_environment()):
        path = config_dir / f"{name}.toml"
        if path.is_file():
            config = deep_merge(config, load_toml(path))
    return config
