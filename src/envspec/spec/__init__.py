"""Typed record population.

Example:
    from dataclasses import dataclass
    from envspec.spec import Duration, env_field, new_record, populate

    @dataclass
    class Server:
        port: int = env_field("PORT", default="8080")
        timeout: Duration = env_field("TIMEOUT", default="30s")

    server = populate(new_record(Server), {"PORT": "9000"})
"""

from envspec.spec.convert import convert_value, parse_bool, parse_int, parse_string_map
from envspec.spec.duration import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    Duration,
    parse_duration,
)
from envspec.spec.fields import (
    EnvParser,
    FieldSpec,
    Kind,
    TypeSpec,
    env_field,
    field_specs,
    new_record,
    type_spec,
)
from envspec.spec.populate import populate, resolve_value

__all__ = [
    # Fields
    "env_field",
    "EnvParser",
    "FieldSpec",
    "TypeSpec",
    "Kind",
    "field_specs",
    "type_spec",
    "new_record",
    # Population
    "populate",
    "resolve_value",
    # Conversion
    "convert_value",
    "parse_int",
    "parse_bool",
    "parse_string_map",
    # Durations
    "Duration",
    "parse_duration",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
]
