"""Exceptions raised while loading env files and populating records.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Usage:
    from envspec.exceptions import (
        EnvSpecError,
        EnvFileNotFoundError,
        MissingRequiredError,
    )

Exceptions raised by a record's own ``parse_env`` are not wrapped and
reach the caller unchanged.
"""

from envspec.exceptions.base import (
    ConfigurationError,
    ConversionError,
    EnvFileNotFoundError,
    EnvFileReadError,
    EnvSpecError,
    InvalidDurationError,
    InvalidVariableNameError,
    MissingRequiredError,
    ResourceNotFoundError,
    UnresolvedTypeHintError,
    UnsupportedTypeError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "EnvSpecError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    # File loading
    "EnvFileNotFoundError",
    "EnvFileReadError",
    "InvalidVariableNameError",
    # Population
    "MissingRequiredError",
    "ConversionError",
    "InvalidDurationError",
    "UnsupportedTypeError",
    "UnresolvedTypeHintError",
]
