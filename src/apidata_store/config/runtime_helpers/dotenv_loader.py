"""Dotenv file loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "
_QUOTES = ("'", '"')
_INLINE_COMMENT = " #"


class DotenvLoader:
    """Loads ``APIDATA_*`` / ``REDIS_*`` defaults from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Later assignments of the same key win, as when the file is sourced
        by a shell.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of environment variables

        Raises:
            ConfigurationError: If file cannot be read
        """
        if not path.exists():
            return {}

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Failed to load configuration from {path}") from exc

        values: Dict[str, str] = {}
        for line in text.splitlines():
            parsed = DotenvLoader.parse_line(line)
            if parsed is not None:
                key, value = parsed
                values[key] = value
        return values

    @staticmethod
    def parse_line(line: str) -> Optional[Tuple[str, str]]:
        """
        Parse one line into ``(key, value)``.

        Returns ``None`` for blank lines, comments and lines without ``=``.
        A leading ``export`` is ignored. A value wrapped in matching quotes is
        taken verbatim; an unquoted value ends at an inline `` #`` comment.
        """
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            return None

        raw_key, raw_value = stripped.split("=", 1)
        if raw_key.startswith(_EXPORT_PREFIX):
            raw_key = raw_key[len(_EXPORT_PREFIX) :]
        key = raw_key.strip()
        if not key:
            return None
        return key, _clean_value(raw_value.strip())


def _clean_value(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    comment_start = value.find(_INLINE_COMMENT)
    if comment_start != -1:
        value = value[:comment_start]
    return value.strip()
