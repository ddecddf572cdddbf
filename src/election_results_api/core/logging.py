"""Loguru logging configuration.

Logs to stderr at a configurable level and, when a ``log_dir`` is provided,
to a log file rotated daily.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"
_LOG_FILENAME = "election-results-api.log"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace Loguru's sinks with the application's.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for log files.  When set, a file sink
            rotated every 24 hours and retained 7 days is added.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)

    if not log_dir:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / _LOG_FILENAME,
        level=level,
        format=_LOG_FORMAT,
        rotation="24h",
        retention="7 days",
    )
