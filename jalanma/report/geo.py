"""Great-circle distance helpers for the report radius filter."""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0

# Widens the SQL prefilter so float rounding never drops a point that the
# exact distance test would keep.
_BOX_MARGIN_DEG = 1e-5


def great_circle_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Distance in kilometres by the spherical law of cosines.

    The ``acos`` argument is clamped to [-1, 1]: identical points can
    overshoot 1.0 by a rounding error.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)

    cos_angle = math.cos(phi1) * math.cos(phi2) * math.cos(delta_lambda) + math.sin(
        phi1
    ) * math.sin(phi2)
    cos_angle = max(-1.0, min(1.0, cos_angle))

    return EARTH_RADIUS_KM * math.acos(cos_angle)


@dataclass(frozen=True)
class BoundingBox:
    """Latitude/longitude rectangle enclosing a search circle.

    ``min_lon``/``max_lon`` are None when the circle covers a pole or
    crosses the antimeridian; only the latitude band is usable then.
    """

    min_lat: float
    max_lat: float
    min_lon: float | None = None
    max_lon: float | None = None

    @property
    def bounds_longitude(self) -> bool:
        return self.min_lon is not None and self.max_lon is not None


def bounding_box(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """Smallest lat/lon rectangle that contains every point within radius_km."""
    angular = radius_km / EARTH_RADIUS_KM
    lat_delta = math.degrees(angular) + _BOX_MARGIN_DEG

    min_lat = lat - lat_delta
    max_lat = lat + lat_delta
    if min_lat <= -90.0 or max_lat >= 90.0:
        return BoundingBox(min_lat=max(min_lat, -90.0), max_lat=min(max_lat, 90.0))

    cos_lat = math.cos(math.radians(lat))
    ratio = math.sin(angular) / cos_lat
    if angular >= math.pi / 2 or ratio >= 1.0:
        return BoundingBox(min_lat=min_lat, max_lat=max_lat)

    lon_delta = math.degrees(math.asin(ratio)) + _BOX_MARGIN_DEG / cos_lat
    min_lon = lon - lon_delta
    max_lon = lon + lon_delta
    if min_lon < -180.0 or max_lon > 180.0:
        return BoundingBox(min_lat=min_lat, max_lat=max_lat)

    return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon)
