"""Base exception classes for envspec.

All envspec exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (variable names, paths, field names)
"""

from typing import Any, Dict, Optional


class EnvSpecError(Exception):
    """Base exception for all envspec errors.

    Attributes:
        code: Machine-readable error code (e.g., "MISSING_REQUIRED_VARIABLE")
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(EnvSpecError):
    """Input data (a name, a value, a record) failed a validation rule."""

    pass


class ResourceNotFoundError(EnvSpecError):
    """A requested resource (usually an env file) doesn't exist."""

    pass


class ConfigurationError(EnvSpecError):
    """A record type is declared in a way the populator cannot handle."""

    pass


class EnvFileNotFoundError(ResourceNotFoundError):
    """Raised when an env file path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            code="ENV_FILE_NOT_FOUND",
            message=f"{path} does not exist",
            details={"path": path},
        )


class EnvFileReadError(EnvSpecError):
    """Raised when an env file exists but cannot be opened, read or decoded.

    The underlying exception is chained as ``__cause__`` by the raiser.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            code="ENV_FILE_READ_ERROR",
            message=f"error reading {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class InvalidVariableNameError(ValidationError):
    """Raised when a key in an env file is not a valid identifier."""

    def __init__(self, name: str, path: Optional[str] = None, line_number: Optional[int] = None):
        self.name = name
        details: Dict[str, Any] = {"name": name}
        if path is not None:
            details["path"] = path
        if line_number is not None:
            details["line"] = line_number
        super().__init__(
            code="INVALID_VARIABLE_NAME",
            message=f"invalid environment variable name: {name}",
            details=details,
        )


class MissingRequiredError(ValidationError):
    """Raised when a required variable has no file or environment value."""

    def __init__(self, variable: str, field_name: Optional[str] = None):
        self.variable = variable
        self.field_name = field_name
        details: Dict[str, Any] = {"variable": variable}
        if field_name is not None:
            details["field"] = field_name
        super().__init__(
            code="MISSING_REQUIRED_VARIABLE",
            message=f"required environment variable {variable} is missing",
            details=details,
        )


class InvalidDurationError(ValidationError):
    """Raised when a string does not match the duration grammar."""

    def __init__(self, value: str, reason: str):
        self.value = value
        super().__init__(
            code="INVALID_DURATION",
            message=f"invalid duration {value!r}: {reason}",
            details={"value": value, "reason": reason},
        )


class ConversionError(ValidationError):
    """Raised when a string value cannot be converted to a field's type."""

    def __init__(self, field_name: str, reason: str):
        self.field_name = field_name
        self.reason = reason
        super().__init__(
            code="CONVERSION_ERROR",
            message=f"error setting field {field_name}: {reason}",
            details={"field": field_name, "reason": reason},
        )


class UnsupportedTypeError(ConfigurationError):
    """Raised when a field is declared with a type the populator cannot convert to."""

    def __init__(self, field_name: str, type_name: str):
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(
            code="UNSUPPORTED_FIELD_TYPE",
            message=f"error setting field {field_name}: unsupported type {type_name}",
            details={"field": field_name, "type": type_name},
        )


class UnresolvedTypeHintError(ConfigurationError):
    """Raised when a record's field annotations cannot be evaluated.

    Typical cause: a record defined inside a function under
    ``from __future__ import annotations`` that names another local class.
    """

    def __init__(self, record_name: str, reason: str):
        self.record_name = record_name
        super().__init__(
            code="UNRESOLVED_TYPE_HINT",
            message=f"cannot resolve field types of {record_name}: {reason}",
            details={"record": record_name, "reason": reason},
        )
