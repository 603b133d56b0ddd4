"""
Configuration file location and loading.

dalia reads a plain text file named `config` from the directory given by
DALIA_CONFIG_PATH, or from ~/.dalia when the variable is unset.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from dalia.errors import ConfigNotFoundError

DALIA_CONFIG_ENV_VAR = "DALIA_CONFIG_PATH"
CONFIG_FILE = "config"
DEFAULT_DIR_NAME = ".dalia"


def get_config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Get the directory that holds the config file.

    Args:
        environ: Environment to consult (defaults to os.environ)

    Returns:
        Directory from DALIA_CONFIG_PATH (with ~ expanded), or ~/.dalia
    """
    env = os.environ if environ is None else environ
    override = env.get(DALIA_CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_DIR_NAME


def get_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Get the full path of the config file."""
    return get_config_dir(environ) / CONFIG_FILE


def read_config(config_path: Optional[Path] = None) -> str:
    """
    Read the configuration text.

    Args:
        config_path: Explicit file to read; resolved from the environment
            when None

    Returns:
        File contents (possibly empty)

    Raises:
        ConfigNotFoundError: If the file is missing, is a directory, or
            cannot be read as UTF-8 text
    """
    path = Path(config_path).expanduser() if config_path else get_config_path()

    if not path.exists():
        raise ConfigNotFoundError(path)
    if path.is_dir():
        raise ConfigNotFoundError(path, "is a directory")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigNotFoundError(path, str(e)) from e
