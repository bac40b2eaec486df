"""
Data models for the date-of-loss engine.

Contains DTOs for geometry, weather events and date-of-loss results.
"""

from .geo import GeoPoint, PropertyContext, PointGeometry, PolygonGeometry, Geometry
from .event import EventType, WeatherEvent, ScoredEvent
from .result import EventJustification, EventSummary, RejectedEvent, DOLResult

__all__ = [
    "GeoPoint",
    "PropertyContext",
    "PointGeometry",
    "PolygonGeometry",
    "Geometry",
    "EventType",
    "WeatherEvent",
    "ScoredEvent",
    "EventJustification",
    "EventSummary",
    "RejectedEvent",
    "DOLResult",
]
