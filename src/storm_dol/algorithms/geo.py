"""
Geographic utilities.

Spherical-earth math used to place weather events relative to a property:
great-circle distance, initial bearing, compass direction, a representative
point for event geometry and a point-in-polygon test.
"""

import math
from typing import Optional, Sequence

from ..core import constants
from ..core.exceptions import InvalidLocationError
from ..models.geo import GeoPoint, Geometry, PointGeometry, PolygonGeometry


def validate_location(point: GeoPoint) -> GeoPoint:
    """
    Check that a point is a finite WGS84 coordinate.

    Args:
        point: Point to check

    Returns:
        The same point

    Raises:
        InvalidLocationError: If lat is outside [-90, 90], lon is outside
            [-180, 180] or either is not a finite number
    """
    try:
        lat, lon = float(point.lat), float(point.lon)
    except (AttributeError, TypeError, ValueError):
        raise InvalidLocationError(f"Location must have numeric lat/lon, got {point!r}")

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidLocationError(f"Location coordinates must be finite, got lat={lat}, lon={lon}")
    if not -constants.MAX_LATITUDE <= lat <= constants.MAX_LATITUDE:
        raise InvalidLocationError(f"Latitude {lat} is outside [-90, 90]")
    if not -constants.MAX_LONGITUDE <= lon <= constants.MAX_LONGITUDE:
        raise InvalidLocationError(f"Longitude {lon} is outside [-180, 180]")

    return point


def haversine_distance(a: GeoPoint, b: GeoPoint) -> float:
    """
    Calculate great-circle distance between two points in miles.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in statute miles (0 when a == b)
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [a.lat, a.lon, b.lat, b.lon])

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.asin(min(1.0, math.sqrt(h)))

    return constants.EARTH_RADIUS_MILES * c


def bearing_degrees(a: GeoPoint, b: GeoPoint) -> float:
    """
    Calculate the initial bearing from a to b.

    Identical points give atan2(0, 0) == 0, i.e. due north.

    Args:
        a: Origin point
        b: Destination point

    Returns:
        Bearing in degrees, normalized to [0, 360)
    """
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlon = math.radians(b.lon - a.lon)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    deg = math.degrees(math.atan2(y, x))
    return (deg + 360) % 360


def cardinal_direction(bearing_deg: float) -> str:
    """
    Map a bearing to one of the 16 compass points.

    Sector boundaries round half up (11.25 -> NNE).

    Args:
        bearing_deg: Bearing in degrees

    Returns:
        Compass label such as 'N', 'ENE' or 'SW'
    """
    index = math.floor(bearing_deg / constants.CARDINAL_SECTOR_DEGREES + 0.5)
    return constants.CARDINAL_DIRECTIONS[index % len(constants.CARDINAL_DIRECTIONS)]


def centroid(geometry: Optional[Geometry]) -> Optional[GeoPoint]:
    """
    Get a representative point for an event geometry.

    Polygons use the plain average of their ring vertices rather than an
    area-weighted centroid; every listed vertex counts, including a closing
    vertex that repeats the first one.

    Args:
        geometry: Point or polygon geometry

    Returns:
        Representative point, or None if the location cannot be resolved
    """
    if isinstance(geometry, PointGeometry):
        return geometry.point

    if isinstance(geometry, PolygonGeometry):
        ring = geometry.ring
        if not ring:
            return None
        lat = sum(p.lat for p in ring) / len(ring)
        lon = sum(p.lon for p in ring) / len(ring)
        return GeoPoint(lat=lat, lon=lon)

    return None


def point_in_polygon(point: GeoPoint, ring: Sequence[GeoPoint]) -> bool:
    """
    Even-odd ray casting test against a single ring.

    Args:
        point: Point to test
        ring: Polygon ring vertices (closed or open)

    Returns:
        True if the point falls inside the ring
    """
    x, y = point.lon, point.lat
    inside = False
    n = len(ring)

    j = n - 1
    for i in range(n):
        xi, yi = ring[i].lon, ring[i].lat
        xj, yj = ring[j].lon, ring[j].lat
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i

    return inside
