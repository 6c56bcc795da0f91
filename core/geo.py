"""Great-circle geofencing shared by every "is P within D of C" decision.

There is exactly one distance formula in the service: haversine on a
spherical Earth of radius 6 371 000 m, with distances in meters. Radii are
always passed in by the caller (usually from settings) rather than baked in.
"""

import math
from typing import NamedTuple

EARTH_RADIUS_METERS = 6_371_000.0

# Meters spanned by one degree of latitude on the sphere above.
METERS_PER_DEGREE = math.pi * EARTH_RADIUS_METERS / 180.0


class Point(NamedTuple):
    """A WGS84 coordinate pair in decimal degrees.

    Either component may be None for records whose location is unknown;
    such points never match anything.
    """

    latitude: float | None
    longitude: float | None

    @property
    def is_located(self) -> bool:
        """True when both coordinates are present."""
        return self.latitude is not None and self.longitude is not None


class BoundingBox(NamedTuple):
    """Coarse lat/lon rectangle used to pre-filter candidates in the store.

    ``min_longitude``/``max_longitude`` are None when the box would wrap the
    antimeridian or reach a pole; callers then filter on latitude only.
    """

    min_latitude: float
    max_latitude: float
    min_longitude: float | None
    max_longitude: float | None


def haversine_distance(a: Point, b: Point) -> float:
    """Return the great-circle distance between two located points in meters.

    Raises:
        ValueError: If either point is missing a coordinate.
    """
    if not (a.is_located and b.is_located):
        raise ValueError("Both points must have latitude and longitude")

    lat1, lon1, lat2, lon2 = map(
        math.radians, (a.latitude, a.longitude, b.latitude, b.longitude)
    )
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair outside [0, 1] for (near-)antipodal points.
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(h))


def within_radius(
    center: Point | None, radius_meters: float, candidate: Point | None
) -> bool:
    """Decide whether ``candidate`` lies within ``radius_meters`` of ``center``.

    Missing points or coordinates and negative radii are never a match; this
    function does not raise. The decision is symmetric in its two points.
    """
    if center is None or candidate is None:
        return False
    if not (center.is_located and candidate.is_located):
        return False
    if radius_meters < 0:
        return False
    return haversine_distance(center, candidate) <= radius_meters


def bounding_box(center: Point, radius_meters: float) -> BoundingBox:
    """Return a rectangle that contains every point within the radius.

    The box is deliberately generous; the exact decision is always made by
    :func:`within_radius`.
    """
    if not center.is_located:
        raise ValueError("Center must have latitude and longitude")

    lat_delta = radius_meters / METERS_PER_DEGREE
    min_lat = center.latitude - lat_delta
    max_lat = center.latitude + lat_delta

    if min_lat <= -90.0 or max_lat >= 90.0:
        return BoundingBox(max(min_lat, -90.0), min(max_lat, 90.0), None, None)

    # Widest longitude span is at the box edge nearest the pole.
    widest_cos = math.cos(math.radians(max(abs(min_lat), abs(max_lat))))
    lon_delta = radius_meters / (METERS_PER_DEGREE * widest_cos)
    min_lon = center.longitude - lon_delta
    max_lon = center.longitude + lon_delta
    if min_lon < -180.0 or max_lon > 180.0:
        return BoundingBox(min_lat, max_lat, None, None)

    return BoundingBox(min_lat, max_lat, min_lon, max_lon)
