"""Logging from env.

Levels (inclusive):
- ERROR: fatal errors only
- WARNING: non-fatal issues and ERROR
- INFO: progress messages, WARNING, and ERROR
- DEBUG: API calls and all levels above

Configure via env (LOGGING_LEVEL, LOGGING_FORMAT). Logs go to stderr;
stdout carries the JSON response.
"""

import logging
import sys

from mr_resource.config import LoggingConfig

# Supported levels only (DEBUG, INFO, WARNING, ERROR)
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class ResourceLogging:
    """Configures root logger from LoggingConfig (env LOGGING_*)."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Apply level and format to the root logger, writing to stderr."""
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=sys.stderr,
            force=True,
        )
