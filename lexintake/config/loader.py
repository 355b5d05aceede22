"""Locate the TOML files that feed `Settings`.

Only paths are resolved here; reading and merging the files is left to
pydantic-settings' TOML source so that env overrides and TOML values go
through one deep-merge.
"""

import os
from pathlib import Path

CONFIG_DIR_ENV = "LEXINTAKE_CONFIG_DIR"
ENVIRONMENT_ENV = "LEXINTAKE_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_CONFIG_FILE = "default.toml"

# How far up from the working directory to look for config/
SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Return the configuration directory.

    LEXINTAKE_CONFIG_DIR wins when set and must exist. Otherwise the first
    `config/` found walking up from the working directory is used.

    Raises:
        FileNotFoundError: If LEXINTAKE_CONFIG_DIR points nowhere
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    start = Path.cwd()
    for candidate in [start, *start.parents][:SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"
    return Path("config")


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def config_files() -> tuple[Path, ...]:
    """Return the TOML files to load, lowest priority first.

    `default.toml` is required; `{LEXINTAKE_ENV}.toml` is included only when
    it exists.

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    config_dir = get_config_dir()
    default_path = config_dir / DEFAULT_CONFIG_FILE
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/{DEFAULT_CONFIG_FILE} or set {CONFIG_DIR_ENV}."
        )

    env_path = config_dir / f"{get_environment()}.toml"
    if env_path.is_file():
        return (default_path, env_path)
    return (default_path,)
