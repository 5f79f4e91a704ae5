"""Parser for ``.env``-style files.

Format:
    # full-line comments and blank lines are ignored
    KEY=value
    QUOTED="a b"            -> a b (one matching outer pair of " or ' is stripped)
    ESCAPED=a\\nb           -> escapes \\n \\t \\r \\\\ are applied before unquoting
    LONG=first \\
         second             -> physical lines ending in \\ are joined
    URL=http://${HOST}/     -> ${NAME} expands from earlier keys of this file, then os.environ

Lines without ``=`` are skipped. Unresolved ``${NAME}`` references are kept
as written.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Dict, Mapping

from envspec.exceptions import EnvFileNotFoundError, EnvFileReadError, InvalidVariableNameError
from envspec.logger import get_logger

VALID_NAME_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
REFERENCE_RE = re.compile(r"\$\{([a-zA-Z_][a-zA-Z0-9_]*)\}")
_ESCAPE_RE = re.compile(r"\\([ntr\\])")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\"}
_QUOTES = ('"', "'")

logger = get_logger()


def is_valid_name(name: str) -> bool:
    """Return True if ``name`` can be used as a variable name."""
    return VALID_NAME_RE.fullmatch(name) is not None


def process_value(value: str) -> str:
    """Apply escape sequences, then strip one matching pair of outer quotes."""
    if not value:
        return value

    value = _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(1)], value)

    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        value = value[1:-1]
    return value


def expand_references(value: str, env_vars: Mapping[str, str]) -> str:
    """Replace ``${NAME}`` with a value from ``env_vars`` or the process environment.

    References that resolve nowhere are left untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in env_vars:
            return env_vars[name]
        if name in os.environ:
            return os.environ[name]
        return match.group(0)

    return REFERENCE_RE.sub(_replace, value)


def parse_env_file(path: Path | str) -> Dict[str, str]:
    """Parse one env file into a resolved mapping.

    Args:
        path: File to read (UTF-8)

    Returns:
        Mapping of the keys defined in this file to their resolved values

    Raises:
        EnvFileNotFoundError: If the file does not exist
        EnvFileReadError: If the file cannot be opened, read or decoded
        InvalidVariableNameError: If a key is not a valid identifier
    """
    path = Path(path)
    env_vars: Dict[str, str] = {}
    buffer: list[str] = []

    try:
        # Only "\n" ends a line; a lone "\r" stays part of the value
        with open(path, encoding="utf-8", newline="\n") as f:
            for line_number, raw in enumerate(f, start=1):
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue

                if line.endswith("\\"):
                    buffer.append(line[:-1])
                    continue

                if buffer:
                    buffer.append(line)
                    line = "".join(buffer)
                    buffer = []

                key, sep, value = line.partition("=")
                if not sep:
                    continue

                key = key.strip()
                if not is_valid_name(key):
                    raise InvalidVariableNameError(key, path=str(path), line_number=line_number)

                value = expand_references(process_value(value.strip()), env_vars)
                env_vars[key] = value
    except FileNotFoundError as exc:
        raise EnvFileNotFoundError(str(path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileReadError(str(path), str(exc)) from exc

    if buffer:
        logger.warning("Discarding unterminated line continuation", path=str(path))

    logger.debug("Loaded env file", path=str(path), keys=len(env_vars))
    return env_vars


__all__ = [
    "VALID_NAME_RE",
    "REFERENCE_RE",
    "is_valid_name",
    "process_value",
    "expand_references",
    "parse_env_file",
]
