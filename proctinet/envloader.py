"""Parsing of simple KEY=VALUE environment files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_env(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines, skipping blanks, comments and malformed lines."""
    env: dict[str, str] = {}
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            logger.warning("Ignoring malformed env line: %s", line)
            continue
        env[key.strip()] = value.strip()
    return env


def load_env(path: str | Path = ".env") -> dict[str, str]:
    """Read an environment file and return its variables as a dictionary."""
    logger.info("Loading environment variables from %s...", path)
    return parse_env(Path(path).read_text(encoding="utf-8"))