"""Great-circle bearing/distance calculations on a spherical Earth."""

import math
from dataclasses import dataclass

from .errors import CoordinateRangeError

EARTH_RADIUS_KM = 6371.0

COMPASS_POINTS = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
                  "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]


@dataclass(frozen=True)
class GeoCoordinate:
    """WGS-84 latitude/longitude in decimal degrees.

    Raises CoordinateRangeError if either value is not finite or outside
    [-90, 90] / [-180, 180]. Out-of-range values are never clamped.
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        if isinstance(self.latitude, str) or isinstance(self.longitude, str):
            raise TypeError("GeoCoordinate takes numbers, parse text with display.parse_coordinate()")
        lat = float(self.latitude)
        lon = float(self.longitude)
        if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
            raise CoordinateRangeError(f"Latitude {self.latitude} out of range [-90, 90]")
        if not (math.isfinite(lon) and -180.0 <= lon <= 180.0):
            raise CoordinateRangeError(f"Longitude {self.longitude} out of range [-180, 180]")
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)

    def __iter__(self):
        yield self.latitude
        yield self.longitude


def as_coordinate(point) -> GeoCoordinate:
    """Accept a GeoCoordinate or any (lat, lon) pair."""
    if isinstance(point, GeoCoordinate):
        return point
    lat, lon = point
    return GeoCoordinate(lat, lon)


def normalize_bearing(degrees: float) -> float:
    """Map an angle into [0, 360). NaN/Inf come back as NaN."""
    value = degrees % 360.0
    # -1e-20 % 360 rounds up to 360.0
    if value >= 360.0:
        return 0.0
    return value


def calc_bearing(start, end) -> float:
    """Calculate initial great-circle bearing from start to end in degrees.

    Args:
        start: Starting point, GeoCoordinate or (lat, lon)
        end: Ending point, GeoCoordinate or (lat, lon)

    Returns:
        Bearing in degrees [0, 360), 0 = true north. Coincident points give 0.
    """
    start, end = as_coordinate(start), as_coordinate(end)
    lat1, lon1, lat2, lon2 = map(math.radians, [start.latitude, start.longitude,
                                                end.latitude, end.longitude])
    dlon = lon2 - lon1
    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    bearing = math.atan2(y, x)
    return normalize_bearing(math.degrees(bearing))


def calc_distance_km(start, end) -> float:
    """Calculate great-circle distance between two points in kilometers.

    Haversine on a sphere of radius EARTH_RADIUS_KM.

    Args:
        start: Starting point, GeoCoordinate or (lat, lon)
        end: Ending point, GeoCoordinate or (lat, lon)

    Returns:
        Distance in kilometers
    """
    start, end = as_coordinate(start), as_coordinate(end)
    lat1, lon1, lat2, lon2 = map(math.radians, [start.latitude, start.longitude,
                                                end.latitude, end.longitude])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    a = min(1.0, a)  # antipodal rounding can push a past 1
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))
    return EARTH_RADIUS_KM * c


def calc_antenna_direction(bearing: float, heading: float) -> float:
    """Rotation from the current device heading to the target bearing.

    The heading is taken as true north. If the compass reports magnetic
    north, correcting for declination is up to the caller.

    Args:
        bearing: Bearing to the target in degrees
        heading: Current compass heading in degrees

    Returns:
        Direction in degrees [0, 360), clockwise from where the device faces
    """
    return normalize_bearing(bearing - heading)


def azimuth_to_heading(azimuth: float) -> float:
    """Convert a sensor azimuth (-180, 180] to a heading in [0, 360)."""
    return normalize_bearing(azimuth)


def bearing_to_direction(bearing: float) -> str:
    """Convert bearing to 16-point compass direction.

    Args:
        bearing: Bearing in degrees (0-360)

    Returns:
        Compass direction (N, NNE, NE, etc.). Values exactly halfway
        between two points get the clockwise one.

    Raises:
        ValueError: If bearing is NaN or infinite (there is no label for it)
    """
    if not math.isfinite(bearing):
        raise ValueError(f"Bearing {bearing} is not finite")
    idx = int(normalize_bearing(bearing + 11.25) / 22.5)
    return COMPASS_POINTS[idx % 16]
