"""
Configuration module for the date-of-loss engine.

Loads configuration from a JSON file and environment variables. The scoring
weights themselves are calibrated constants (see ``constants``) and are not
configurable here.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "scoring": {
        "lookback_days": None,
        "unresolved_location": constants.DEFAULT_UNRESOLVED_LOCATION,
    },
    "logging": {
        "level": constants.DEFAULT_LOG_LEVEL,
        "file": constants.DEFAULT_LOG_FILE,
        "to_file": constants.DEFAULT_LOG_TO_FILE,
    },
}

UNRESOLVED_LOCATION_CHOICES = ("exclude", "score_as_distant")
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FALSE_VALUES = ("0", "false", "no", "off")


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var;
                        with neither set, built-in defaults are used
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file and merge it over the defaults."""
        if not self.config_file:
            return

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("DOL_LOOKBACK_DAYS"):
            try:
                self.config["scoring"]["lookback_days"] = int(os.getenv("DOL_LOOKBACK_DAYS"))
            except ValueError:
                raise ValueError(
                    f"DOL_LOOKBACK_DAYS must be an integer, got {os.getenv('DOL_LOOKBACK_DAYS')!r}"
                )

        if os.getenv("DOL_UNRESOLVED_LOCATION"):
            self.config["scoring"]["unresolved_location"] = os.getenv("DOL_UNRESOLVED_LOCATION")

        if os.getenv("LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config["logging"]["file"] = os.getenv("LOG_FILE")

        if os.getenv("LOG_TO_FILE"):
            self.config["logging"]["to_file"] = os.getenv("LOG_TO_FILE").strip().lower() not in FALSE_VALUES

    def _validate_config(self) -> None:
        """Validate configuration values."""
        errors = []

        lookback_days = self.get("scoring.lookback_days")
        if lookback_days is not None:
            if isinstance(lookback_days, bool) or not isinstance(lookback_days, int) or lookback_days < 1:
                errors.append(f"scoring.lookback_days must be a positive integer, got {lookback_days!r}")

        unresolved = self.get("scoring.unresolved_location")
        if unresolved not in UNRESOLVED_LOCATION_CHOICES:
            errors.append(
                f"scoring.unresolved_location must be one of "
                f"{', '.join(UNRESOLVED_LOCATION_CHOICES)}, got {unresolved!r}"
            )

        level = str(self.get("logging.level", "")).upper()
        if level not in LOG_LEVEL_CHOICES:
            errors.append(f"logging.level must be one of {', '.join(LOG_LEVEL_CHOICES)}, got {level!r}")

        if not isinstance(self.get("logging.to_file"), bool):
            errors.append(f"logging.to_file must be true or false, got {self.get('logging.to_file')!r}")

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'scoring.lookback_days')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def lookback_days(self) -> Optional[int]:
        """Get look-back window in days (None disables the window)."""
        return self.get("scoring.lookback_days")

    @property
    def unresolved_location(self) -> str:
        """Get the policy for events whose location cannot be resolved."""
        return self.get("scoring.unresolved_location", constants.DEFAULT_UNRESOLVED_LOCATION)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return str(self.get("logging.level", constants.DEFAULT_LOG_LEVEL)).upper()

    @property
    def log_file(self) -> str:
        """Get log file path."""
        return self.get("logging.file", constants.DEFAULT_LOG_FILE)

    @property
    def log_to_file(self) -> bool:
        """Whether to write the DEBUG log file."""
        return self.get("logging.to_file", constants.DEFAULT_LOG_TO_FILE)

    def __repr__(self) -> str:
        return f"Config(file={self.config_file}, lookback_days={self.lookback_days})"
