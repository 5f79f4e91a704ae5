"""Multi-file environment loader.

Loads env files in the order given:
1) each file, later files overriding earlier ones for the same key
2) explicit overrides (highest precedence)

Each file expands ``${NAME}`` against its own earlier lines and the process
environment only. The process environment is not copied into the result;
the populator consults it later as a fallback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from envspec.config.parser import parse_env_file


class EnvLoader:
    """Load and merge the resolved mappings of several env files."""

    def __init__(self, *env_files: Path | str) -> None:
        self.env_files: Tuple[Path, ...] = tuple(Path(p) for p in env_files)

    def load(self, overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Load every file and merge the results.

        Args:
            overrides: Values applied after all files

        Returns:
            The merged resolved mapping
        """
        data: Dict[str, str] = {}

        for env_path in self.env_files:
            data.update(parse_env_file(env_path))

        if overrides:
            data.update({k: str(v) for k, v in overrides.items()})

        return data


__all__ = ["EnvLoader"]
