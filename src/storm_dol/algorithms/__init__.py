"""
Scoring algorithms for date-of-loss analysis.

Provides geographic utilities, event scoring and date-of-loss selection.
"""

from .geo import (
    validate_location,
    haversine_distance,
    bearing_degrees,
    cardinal_direction,
    centroid,
    point_in_polygon,
)
from .scoring import (
    UnresolvedLocationPolicy,
    EventScorer,
    magnitude_score,
    proximity_score,
    score_event,
    score_events_for_property,
)
from .selection import DOLSelector, pick_dol, rank_dates, summarize_events

__all__ = [
    "validate_location",
    "haversine_distance",
    "bearing_degrees",
    "cardinal_direction",
    "centroid",
    "point_in_polygon",
    "UnresolvedLocationPolicy",
    "EventScorer",
    "magnitude_score",
    "proximity_score",
    "score_event",
    "score_events_for_property",
    "DOLSelector",
    "pick_dol",
    "rank_dates",
    "summarize_events",
]
