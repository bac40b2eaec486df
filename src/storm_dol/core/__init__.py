"""
Core utilities for the date-of-loss engine.

Provides configuration management, logging, constants and timestamp handling.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import StormDolError, InvalidEventError, InvalidLocationError

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "StormDolError",
    "InvalidEventError",
    "InvalidLocationError",
]
