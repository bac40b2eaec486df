"""
Event scoring module.

Scores each weather event against a property by combining a severity
(magnitude) component with a distance (proximity) component, and builds the
per-day maximum score index used for date-of-loss selection.

The proximity curve is piecewise linear and jumps up at 5 and 10 miles.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from ..core import constants
from ..core.date_utils import DateUtils
from ..models.event import EventType, WeatherEvent, ScoredEvent
from ..models.geo import GeoPoint, PolygonGeometry
from .geo import haversine_distance, bearing_degrees, cardinal_direction, centroid, point_in_polygon


class UnresolvedLocationPolicy(Enum):
    """What to do with events whose location cannot be resolved."""

    EXCLUDE = "exclude"
    SCORE_AS_DISTANT = "score_as_distant"


def magnitude_score(event: WeatherEvent) -> float:
    """
    Score the severity of an event.

    Args:
        event: Weather event

    Returns:
        Magnitude score (hail capped at 50, wind capped at 30)
    """
    event_type = event.type
    magnitude = event.magnitude

    if event_type is EventType.HAIL_REPORT:
        if magnitude is None:
            return constants.DEFAULT_MAGNITUDE_SCORE
        return min(constants.HAIL_SCORE_CAP, max(0, magnitude * constants.HAIL_POINTS_PER_INCH))
    elif event_type is EventType.WIND_REPORT:
        if magnitude is None:
            return constants.DEFAULT_MAGNITUDE_SCORE
        return min(constants.WIND_SCORE_CAP, max(0, magnitude / constants.WIND_MPH_PER_POINT))
    elif event_type is EventType.TOR_WARNING:
        return constants.TORNADO_WARNING_SCORE
    elif event_type is EventType.SVR_WARNING:
        return constants.SEVERE_THUNDERSTORM_WARNING_SCORE
    elif event_type is EventType.FF_WARNING:
        return constants.FLASH_FLOOD_WARNING_SCORE
    else:
        return constants.DEFAULT_MAGNITUDE_SCORE


def proximity_score(distance_miles: float) -> float:
    """
    Score how close an event is to the property.

    Breakpoints:
        d <= 1:        50
        1 < d <= 5:    30 - (d - 1) * 5    (30 .. 10)
        5 < d <= 10:   15 - (d - 5) * 2    (15 .. 5)
        10 < d <= 20:  10 - (d - 10)       (10 .. 0)
        d > 20:        0

    Args:
        distance_miles: Distance from the property in miles

    Returns:
        Proximity score
    """
    d = distance_miles
    if d <= constants.PROXIMITY_DIRECT_HIT_MILES:
        return constants.PROXIMITY_DIRECT_HIT_SCORE
    if d <= constants.PROXIMITY_NEAR_MILES:
        return 30 - (d - 1) * 5
    if d <= constants.PROXIMITY_MID_MILES:
        return 15 - (d - 5) * 2
    if d <= constants.PROXIMITY_FAR_MILES:
        return max(0, 10 - (d - 10))
    return 0


class EventScorer:
    """
    Score weather events against a property location.

    Every event handed in is scored. Events without a resolvable location get
    zero proximity; quarantining them is the validator's job.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize event scorer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def score_event(self, event: WeatherEvent, property_location: GeoPoint) -> ScoredEvent:
        """
        Score a single event and attach its geospatial context.

        Args:
            event: Weather event
            property_location: Insured property location

        Returns:
            ScoredEvent with score = magnitude score + proximity score
        """
        mag = magnitude_score(event)
        location = centroid(event.geometry)

        if location is None:
            self.logger.debug(f"Event {event.id}: location unresolved, proximity score 0")
            return ScoredEvent(
                event=event,
                distance_miles=None,
                bearing_deg=None,
                direction_cardinal=None,
                magnitude_score=mag,
                proximity_score=0,
                score=mag,
            )

        distance = haversine_distance(property_location, location)
        bearing = bearing_degrees(property_location, location)
        prox = proximity_score(distance)

        inside = None
        if isinstance(event.geometry, PolygonGeometry):
            inside = point_in_polygon(property_location, event.geometry.ring)

        self.logger.debug(
            f"Event {event.id} ({event.type.value}): "
            f"distance={distance:.2f} mi, bearing={bearing:.1f}, "
            f"magnitude_score={mag:.2f}, proximity_score={prox:.2f}"
        )

        return ScoredEvent(
            event=event,
            distance_miles=distance,
            bearing_deg=bearing,
            direction_cardinal=cardinal_direction(bearing),
            magnitude_score=mag,
            proximity_score=prox,
            score=mag + prox,
            property_inside=inside,
        )

    def score_events_for_property(
        self,
        events: Iterable[WeatherEvent],
        property_location: GeoPoint
    ) -> Tuple[List[ScoredEvent], Dict[str, float]]:
        """
        Score all events and index the best score per calendar date.

        Args:
            events: Weather events
            property_location: Insured property location

        Returns:
            Tuple of (scored_events, by_date) where by_date maps 'YYYY-MM-DD'
            to the maximum event score seen on that date

        Raises:
            InvalidEventError: If an event timestamp has no valid date prefix
        """
        scored: List[ScoredEvent] = []
        by_date: Dict[str, float] = {}

        for event in events:
            # Validate before scoring so a bad timestamp never reaches the index
            date_key = DateUtils.event_date(event.time_utc)

            scored_event = self.score_event(event, property_location)
            scored.append(scored_event)

            if date_key not in by_date or scored_event.score > by_date[date_key]:
                by_date[date_key] = scored_event.score

        self.logger.debug(f"Scored {len(scored)} events across {len(by_date)} dates")
        return scored, by_date


def score_event(event: WeatherEvent, property_location: GeoPoint) -> ScoredEvent:
    """Score a single event with the default scorer."""
    return EventScorer().score_event(event, property_location)


def score_events_for_property(
    events: Iterable[WeatherEvent],
    property_location: GeoPoint
) -> Tuple[List[ScoredEvent], Dict[str, float]]:
    """Score events and build the per-date max index with the default scorer."""
    return EventScorer().score_events_for_property(events, property_location)
