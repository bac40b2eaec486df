"""
Date-of-loss analyzer.

Runs the full pipeline for one property: validate events, apply the optional
look-back window, score every event and select the date of loss.
"""

import dataclasses
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from .core import Config, LoggerContext
from .algorithms import EventScorer, DOLSelector, UnresolvedLocationPolicy, summarize_events, validate_location
from .models import GeoPoint, WeatherEvent, DOLResult
from .processing import EventProcessor


class DOLAnalyzer:
    """
    High-level facade for date-of-loss analysis.

    Stateless between calls: the same property and events always give the
    same result.
    """

    def __init__(self, config: Optional[Config] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize analyzer.

        Args:
            config: Configuration (defaults to built-in settings plus environment)
            logger: Logger instance
        """
        self.config = config or Config()
        self.logger = logger or logging.getLogger(__name__)
        self.policy = UnresolvedLocationPolicy(self.config.unresolved_location)
        self.processor = EventProcessor(logger)
        self.scorer = EventScorer(logger)
        self.selector = DOLSelector(logger)

    def analyze(
        self,
        property_location: GeoPoint,
        events: Iterable[WeatherEvent],
        as_of: Optional[datetime] = None,
        days_back: Optional[int] = None
    ) -> DOLResult:
        """
        Recommend a date of loss for a property.

        Args:
            property_location: Insured property location
            events: Normalized weather events
            as_of: End of the look-back window (defaults to now)
            days_back: Look-back window in days (defaults to the configured value;
                no window when neither is set)

        Returns:
            DOLResult; total_events_scanned counts every event passed in

        Raises:
            InvalidLocationError: If the property location is not a valid coordinate
        """
        validate_location(property_location)

        events = list(events)
        if days_back is None:
            days_back = self.config.lookback_days

        with LoggerContext(self.logger, f"date-of-loss analysis of {len(events)} events"):
            accepted, rejected = self.processor.validate_events(
                events,
                self.policy,
                require_timestamp=days_back is not None
            )

            if days_back is not None:
                accepted = self.processor.filter_by_window(accepted, days_back, as_of)

            scored, by_date = self.scorer.score_events_for_property(accepted, property_location)
            result = self.selector.pick_dol(scored, by_date)

        result = dataclasses.replace(
            result,
            total_events_scanned=len(events),
            summary=summarize_events(scored),
            rejected_events=tuple(rejected),
        )

        if result.has_recommendation:
            self.logger.info(
                f"Recommended date of loss {result.recommended_date_utc} "
                f"(confidence {result.confidence:.2f}, {len(result.top_events)} supporting events)"
            )
        else:
            self.logger.info("No date of loss could be recommended")

        return result

    def analyze_raw(
        self,
        lat: float,
        lon: float,
        raw_events: Iterable[Dict[str, Any]],
        as_of: Optional[datetime] = None,
        days_back: Optional[int] = None
    ) -> DOLResult:
        """
        Recommend a date of loss from raw JSON-style event records.

        Records that cannot be normalized are reported as rejected and still
        count toward total_events_scanned.

        Args:
            lat: Property latitude
            lon: Property longitude
            raw_events: Raw event mappings
            as_of: End of the look-back window (defaults to now)
            days_back: Look-back window in days

        Returns:
            DOLResult
        """
        property_location = validate_location(GeoPoint(lat=lat, lon=lon))

        raw_events = list(raw_events)
        events, unusable = self.processor.normalizer.partition_raw(raw_events)

        result = self.analyze(property_location, events, as_of=as_of, days_back=days_back)

        return dataclasses.replace(
            result,
            total_events_scanned=len(raw_events),
            rejected_events=tuple(unusable) + result.rejected_events,
        )
