"""Entry points: load env files and populate a record in one call.

Example:
    from envspec import env_field, register_environment

    @dataclass
    class AppConfig:
        port: int = env_field("PORT", default="8080")
        secret: str = env_field("SECRET", required=True)

    config = register_environment(AppConfig)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar, Union, overload

from dotenv import find_dotenv

from envspec.config.env_loader import EnvLoader
from envspec.config.settings import LoaderSettings
from envspec.exceptions import EnvSpecError
from envspec.logger import create_logger, get_logger
from envspec.spec.fields import new_record
from envspec.spec.populate import populate

T = TypeVar("T")

logger = get_logger()


@overload
def fill_specification(target: Type[T], *paths: Union[Path, str]) -> T: ...


@overload
def fill_specification(target: T, *paths: Union[Path, str]) -> T: ...


def fill_specification(target: Any, *paths: Union[Path, str]) -> Any:
    """Load ``paths`` in order and populate ``target`` from them.

    Args:
        target: A record dataclass instance, or a record class to instantiate
        *paths: Env files; later files override earlier ones

    Returns:
        The populated record

    Raises:
        EnvSpecError: On any load or population failure
    """
    record = new_record(target) if isinstance(target, type) else target
    env_vars = EnvLoader(*paths).load()
    return populate(record, env_vars)


def locate_env_file(env_file: Path) -> Path:
    """Find ``env_file``, searching parent directories for a bare relative name.

    Returns the path unchanged when nothing is found so that loading it
    reports the missing file.
    """
    if env_file.is_absolute() or env_file.exists() or env_file.parent != Path("."):
        return env_file
    found = find_dotenv(env_file.name, usecwd=True)
    return Path(found) if found else env_file


def configure_logging(settings: LoaderSettings) -> None:
    """Apply the level, file and format from ``settings`` to the package logger."""
    # Rebinds the handlers of the shared "envspec" logging.Logger, so module
    # level loggers pick up the change too
    create_logger(
        name="envspec",
        level=getattr(logging, settings.log_level),
        log_file=settings.log_file,
        json_format=settings.log_json,
    )


def register_environment(target: Any, settings: Optional[LoaderSettings] = None) -> Any:
    """Populate ``target`` for application startup, exiting on failure.

    Outside PROD the configured env file is loaded (and must exist);
    in PROD only the process environment is used.

    Args:
        target: A record dataclass instance or class
        settings: Loader settings (default: LoaderSettings.from_env())

    Returns:
        The populated record
    """
    if settings is None:
        try:
            settings = LoaderSettings.from_env()
        except ValueError as exc:
            logger.critical("Invalid loader settings", error=str(exc))
            sys.exit(1)
    configure_logging(settings)

    paths: List[Path] = []
    if settings.should_load_env_file:
        paths.append(locate_env_file(settings.env_file))

    try:
        record = fill_specification(target, *paths)
    except EnvSpecError as exc:
        logger.critical(
            "Failed to load environment",
            error=str(exc),
            code=exc.code,
            env=settings.env,
        )
        sys.exit(1)
    except Exception as exc:
        # Anything else, such as an error from a record's parse_env
        logger.critical(
            "Failed to load environment",
            error=str(exc),
            error_type=type(exc).__name__,
            env=settings.env,
        )
        sys.exit(1)

    logger.info("Environment loaded", env=settings.env, files=len(paths))
    return record


__all__ = [
    "fill_specification",
    "register_environment",
    "locate_env_file",
    "configure_logging",
]
