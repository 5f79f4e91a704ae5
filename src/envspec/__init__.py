"""envspec - Typed configuration records from .env files and the environment.

This package provides:
- config: .env parsing (quotes, escapes, continuation, ${NAME} expansion)
  and multi-file loading
- spec: dataclass field metadata, type conversion and record population
- register: one-call loading for application startup
- logger: structured logging with JSON support
- exceptions: exception classes with structured error info
"""

__version__ = "1.0.0"

from envspec.logger import (
    Logger,
    StructuredLogger,
    get_logger,
    create_logger,
)

from envspec.config import (
    EnvLoader,
    LoaderSettings,
    parse_env_file,
)

from envspec.spec import (
    Duration,
    EnvParser,
    env_field,
    new_record,
    populate,
)

from envspec.register import (
    fill_specification,
    register_environment,
)

from envspec.exceptions import (
    EnvSpecError,
    ValidationError,
    ResourceNotFoundError,
    ConfigurationError,
    EnvFileNotFoundError,
    EnvFileReadError,
    InvalidVariableNameError,
    MissingRequiredError,
    ConversionError,
    InvalidDurationError,
    UnsupportedTypeError,
    UnresolvedTypeHintError,
)

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
    # Config
    "EnvLoader",
    "LoaderSettings",
    "parse_env_file",
    # Records
    "Duration",
    "EnvParser",
    "env_field",
    "new_record",
    "populate",
    # Entry points
    "fill_specification",
    "register_environment",
    # Exceptions
    "EnvSpecError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "EnvFileNotFoundError",
    "EnvFileReadError",
    "InvalidVariableNameError",
    "MissingRequiredError",
    "ConversionError",
    "InvalidDurationError",
    "UnsupportedTypeError",
    "UnresolvedTypeHintError",
]
