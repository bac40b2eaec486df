"""
Event processing module for the date-of-loss engine.

Provides normalization, validation and look-back filtering of weather events.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..algorithms.scoring import UnresolvedLocationPolicy
from ..models.event import WeatherEvent
from ..models.result import RejectedEvent
from .normalizer import EventNormalizer, normalize_event, parse_geometry
from .validator import EventValidator
from .window import filter_by_window


class EventProcessor:
    """
    Unified event processor combining normalization, validation and windowing.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize event processor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = EventNormalizer(logger)
        self.validator = EventValidator(logger)

    def normalize_events(self, raw_events: Iterable[Dict[str, Any]]) -> List[WeatherEvent]:
        """
        Convert raw records to weather events.

        Args:
            raw_events: Raw event mappings

        Returns:
            List of WeatherEvent
        """
        return self.normalizer.normalize_events(raw_events)

    def validate_events(
        self,
        events: Iterable[WeatherEvent],
        policy: UnresolvedLocationPolicy = UnresolvedLocationPolicy.EXCLUDE,
        require_timestamp: bool = False
    ) -> Tuple[List[WeatherEvent], List[RejectedEvent]]:
        """
        Split events into usable and rejected.

        Args:
            events: Weather events
            policy: Unresolved location policy
            require_timestamp: Also require a fully parseable ISO-8601 timestamp

        Returns:
            Tuple of (accepted_events, rejected_events)
        """
        return self.validator.partition(events, policy, require_timestamp)

    def filter_by_window(
        self,
        events: Iterable[WeatherEvent],
        days_back: int,
        as_of: Optional[datetime] = None
    ) -> List[WeatherEvent]:
        """
        Keep events inside the look-back window.

        Args:
            events: Weather events with parseable timestamps
            days_back: Window length in days
            as_of: End of the window (defaults to now)

        Returns:
            Events inside the window
        """
        return filter_by_window(events, days_back, as_of, self.logger)


__all__ = [
    "EventNormalizer",
    "EventValidator",
    "EventProcessor",
    "normalize_event",
    "parse_geometry",
    "filter_by_window",
]
