"""Runtime settings for envspec itself.

Controls which env file ``register_environment`` reads and how the package
logs. Values come from ``{prefix}_*`` variables in the process environment.

Environment variables (default prefix ENVSPEC):
    ENVSPEC_ENV: DEV, TEST or PROD (default DEV). PROD skips the env file.
    ENVSPEC_ENV_FILE: Env file read outside PROD (default .env)
    ENVSPEC_LOG_LEVEL: Logging level (default INFO)
    ENVSPEC_LOG_FILE: Optional file for log output
    ENVSPEC_LOG_JSON: "true" for JSON log lines (default false)

The logging variables are the ones ``envspec.logger.create_logger`` reads for
the "envspec" logger.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

_ALLOWED_ENVS = {"DEV", "TEST", "PROD"}
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_ENV_FILE = ".env"


@dataclass
class LoaderSettings:
    """Settings controlling how envspec loads configuration.

    Attributes:
        env: Deployment mode (DEV, TEST or PROD)
        env_file: File loaded by register_environment outside PROD
        log_level: Log level name
        log_file: Optional file for log output
        log_json: Emit JSON log lines instead of text
        prefix: Environment variable prefix used by from_env
    """

    env: str = "DEV"
    env_file: Path = field(default_factory=lambda: Path(DEFAULT_ENV_FILE))
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False
    prefix: str = "ENVSPEC"

    @classmethod
    def from_env(cls, prefix: str = "ENVSPEC") -> "LoaderSettings":
        """Load settings from environment variables

        Args:
            prefix: Environment variable prefix

        Returns:
            LoaderSettings populated from the process environment
        """
        return cls(
            env=os.environ.get(f"{prefix}_ENV", "DEV"),
            env_file=Path(os.environ.get(f"{prefix}_ENV_FILE") or DEFAULT_ENV_FILE),
            log_level=os.environ.get(f"{prefix}_LOG_LEVEL", "INFO"),
            log_file=os.environ.get(f"{prefix}_LOG_FILE") or None,
            log_json=os.environ.get(f"{prefix}_LOG_JSON", "false").lower() == "true",
            prefix=prefix,
        )

    def __post_init__(self) -> None:
        self.env_file = Path(self.env_file)
        self.env = self.env.upper()
        self.log_level = self.log_level.upper()
        self.validate()

    @property
    def is_prod(self) -> bool:
        return self.env == "PROD"

    @property
    def is_test(self) -> bool:
        return self.env == "TEST"

    @property
    def is_dev(self) -> bool:
        return self.env == "DEV"

    @property
    def should_load_env_file(self) -> bool:
        """Env files are a development convenience; production reads only the environment."""
        return not self.is_prod

    def validate(self) -> None:
        """
        Raises:
            ValueError: If env or log_level is not recognised
        """
        if self.env not in _ALLOWED_ENVS:
            raise ValueError(f"Invalid environment '{self.env}'. Expected one of {_ALLOWED_ENVS}.")

        if self.log_level not in _ALLOWED_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{self.log_level}'. Expected one of {_ALLOWED_LOG_LEVELS}."
            )
