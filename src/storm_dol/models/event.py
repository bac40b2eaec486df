"""
Weather event data models.

Contains DTOs for normalized weather events and their scored form.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geo import Geometry


class EventType(Enum):
    """Weather event kinds understood by the scoring model."""

    HAIL_REPORT = "hail_report"
    WIND_REPORT = "wind_report"
    TOR_WARNING = "tor_warning"
    SVR_WARNING = "svr_warning"
    FF_WARNING = "ff_warning"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> "EventType":
        """Parse a type string, mapping anything unrecognized to OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class WeatherEvent:
    """Normalized weather event supplied by an upstream provider."""

    id: str
    type: EventType
    time_utc: str  # ISO-8601, starts with YYYY-MM-DD
    geometry: Optional[Geometry] = None
    magnitude: Optional[float] = None  # inches for hail, mph for wind
    source: str = ""


@dataclass(frozen=True)
class ScoredEvent:
    """A weather event with geospatial context and score attached.

    The geospatial fields are None when the event location could not be
    resolved.
    """

    event: WeatherEvent
    distance_miles: Optional[float]
    bearing_deg: Optional[float]
    direction_cardinal: Optional[str]
    magnitude_score: float
    proximity_score: float
    score: float
    property_inside: Optional[bool] = None  # polygon events only

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def type(self) -> EventType:
        return self.event.type

    @property
    def magnitude(self) -> Optional[float]:
        return self.event.magnitude

    @property
    def time_utc(self) -> str:
        return self.event.time_utc

    @property
    def source(self) -> str:
        return self.event.source

    @property
    def location_resolved(self) -> bool:
        return self.distance_miles is not None
