"""
Event normalization module.

Converts JSON-style weather records (GeoJSON geometry with [lon, lat]
coordinates) into WeatherEvent models.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.exceptions import InvalidEventError
from ..models.event import EventType, WeatherEvent
from ..models.geo import GeoPoint, Geometry, PointGeometry, PolygonGeometry
from ..models.result import RejectedEvent


def _to_point(position: Any) -> Optional[GeoPoint]:
    if not isinstance(position, (list, tuple)) or len(position) < 2:
        return None
    try:
        lon, lat = float(position[0]), float(position[1])
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return None
    return GeoPoint(lat=lat, lon=lon)


def parse_geometry(geometry: Optional[Dict[str, Any]]) -> Optional[Geometry]:
    """
    Parse a GeoJSON Point or Polygon.

    Only the outer ring of a polygon is kept. Anything else (missing,
    malformed, MultiPolygon, ...) yields None.

    Args:
        geometry: GeoJSON geometry mapping

    Returns:
        PointGeometry, PolygonGeometry or None
    """
    if not isinstance(geometry, dict):
        return None

    geom_type = geometry.get("type")
    coordinates = geometry.get("coordinates")

    if geom_type == "Point":
        point = _to_point(coordinates)
        return PointGeometry(point=point) if point else None

    if geom_type == "Polygon":
        if not isinstance(coordinates, (list, tuple)) or not coordinates:
            return PolygonGeometry(ring=())
        outer = coordinates[0] if isinstance(coordinates[0], (list, tuple)) else []
        ring = []
        for position in outer:
            point = _to_point(position)
            if point is None:
                return None
            ring.append(point)
        return PolygonGeometry(ring=tuple(ring))

    return None


def _to_magnitude(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        magnitude = float(value)
    except (TypeError, ValueError):
        return None
    return magnitude if math.isfinite(magnitude) else None


def normalize_event(raw: Dict[str, Any]) -> WeatherEvent:
    """
    Build a WeatherEvent from a raw record.

    Args:
        raw: Mapping with id, type, magnitude, time_utc, geometry and source

    Returns:
        WeatherEvent

    Raises:
        InvalidEventError: If the record is not a mapping or lacks id or time_utc
    """
    if not isinstance(raw, dict):
        raise InvalidEventError(f"Event record must be an object, got {type(raw).__name__}")

    event_id = raw.get("id")
    if event_id is None or str(event_id) == "":
        raise InvalidEventError("Event record is missing 'id'")
    event_id = str(event_id)

    time_utc = raw.get("time_utc")
    if not isinstance(time_utc, str) or not time_utc:
        raise InvalidEventError(f"Event {event_id} is missing 'time_utc'", event_id=event_id)

    return WeatherEvent(
        id=event_id,
        type=EventType.parse(raw.get("type")),
        magnitude=_to_magnitude(raw.get("magnitude")),
        time_utc=time_utc,
        geometry=parse_geometry(raw.get("geometry")),
        source=str(raw.get("source") or ""),
    )


class EventNormalizer:
    """Normalize batches of raw weather records."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize normalizer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def normalize_events(self, raw_events: Iterable[Dict[str, Any]]) -> List[WeatherEvent]:
        """
        Normalize raw records, raising on the first unusable one.

        Args:
            raw_events: Raw event mappings

        Returns:
            List of WeatherEvent
        """
        events = [normalize_event(raw) for raw in raw_events]

        unresolved = sum(1 for e in events if e.geometry is None)
        if unresolved:
            self.logger.warning(f"{unresolved} of {len(events)} events have no usable geometry")

        self.logger.debug(f"Normalized {len(events)} events")
        return events

    def partition_raw(
        self,
        raw_events: Iterable[Dict[str, Any]]
    ) -> Tuple[List[WeatherEvent], List[RejectedEvent]]:
        """
        Normalize raw records, setting aside the ones that cannot be used.

        Records without an id are reported by their position ('#<index>').

        Args:
            raw_events: Raw event mappings

        Returns:
            Tuple of (events, rejected_records)
        """
        events: List[WeatherEvent] = []
        rejected: List[RejectedEvent] = []

        for index, raw in enumerate(raw_events):
            try:
                events.append(normalize_event(raw))
            except InvalidEventError as e:
                record_id = e.event_id or f"#{index}"
                self.logger.warning(f"Rejected record {record_id}: {e}")
                rejected.append(RejectedEvent(id=record_id, reason=str(e)))

        self.logger.debug(f"Normalized {len(events)} events, rejected {len(rejected)} records")
        return events, rejected
