"""Env file loading for envspec.

Example:
    from envspec.config import EnvLoader, parse_env_file

    values = EnvLoader(".env", ".env.local").load()
    single = parse_env_file(".env")
"""

from envspec.config.env_loader import EnvLoader
from envspec.config.parser import (
    REFERENCE_RE,
    VALID_NAME_RE,
    expand_references,
    is_valid_name,
    parse_env_file,
    process_value,
)
from envspec.config.settings import DEFAULT_ENV_FILE, LoaderSettings

__all__ = [
    # Parsing
    "parse_env_file",
    "process_value",
    "expand_references",
    "is_valid_name",
    "VALID_NAME_RE",
    "REFERENCE_RE",
    # Loading
    "EnvLoader",
    # Settings
    "LoaderSettings",
    "DEFAULT_ENV_FILE",
]
