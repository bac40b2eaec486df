"""
Geospatial data models.

Coordinates are WGS84 degrees. Polygons carry a single outer ring; holes and
multi-polygons are not represented.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair."""

    lat: float
    lon: float


# The insured property is just the scoring origin
PropertyContext = GeoPoint


@dataclass(frozen=True)
class PointGeometry:
    """Point geometry (e.g., a spotter hail report)."""

    point: GeoPoint


@dataclass(frozen=True)
class PolygonGeometry:
    """Single-ring polygon geometry (e.g., a warning polygon)."""

    ring: Tuple[GeoPoint, ...]


Geometry = Union[PointGeometry, PolygonGeometry]
