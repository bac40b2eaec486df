"""
Logging configuration for the date-of-loss engine.

Console output goes to stderr so stdout stays clean for the JSON result.
The optional file log carries DEBUG detail (per-event scores, window bounds).
"""

import logging
import os
import sys
import time
from pathlib import Path
from typing import Optional

from . import constants


CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _reset_handlers(logger: logging.Logger) -> None:
    # Repeated setup must not stack handlers or leak open log files
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logger(
    name: str = "storm_dol",
    log_file: Optional[str] = None,
    log_level: str = constants.DEFAULT_LOG_LEVEL,
    log_to_file: bool = True
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var or default
        log_level: Logger threshold (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Attach the DEBUG file handler; when False nothing is
            written to disk and no log directory is created

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(log_level))
    _reset_handlers(logger)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, constants.LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_to_file:
        log_path = Path(log_file or os.getenv("LOG_FILE", constants.DEFAULT_LOG_FILE))
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, constants.LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


class LoggerContext:
    """
    Log the start, duration and outcome of one pipeline step.

    Exceptions are logged with their traceback and then re-raised.
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.duration: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.debug(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self._started

        if exc_type is None:
            self.logger.debug(f"Completed {self.operation} in {self.duration:.3f}s")
        else:
            self.logger.error(
                f"Failed {self.operation} after {self.duration:.3f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
