"""Formatting of bearings/distances/coordinates and parsing of typed-in values."""

from .errors import CoordinateParseError
from .geo_utils import GeoCoordinate, normalize_bearing


def format_angle(degrees: float) -> str:
    return f"{degrees:.1f}°"


def format_distance(km: float) -> str:
    return f"{km:.1f} km"


def format_coordinate(value: float) -> str:
    return f"{value:.6f}"


def format_heading(heading: float) -> str:
    """Heading rounded to the nearest whole degree (360 shows as 0)."""
    return f"{round(normalize_bearing(heading)) % 360}°"


def parse_degrees(text: str) -> float:
    """Parse a number typed by the user.

    Raises:
        CoordinateParseError: If text is empty or not a number
    """
    try:
        return float(str(text).strip())
    except ValueError:
        raise CoordinateParseError(f"Not a number: {text!r}") from None


def parse_coordinate(lat_text: str, lon_text: str) -> GeoCoordinate:
    """Parse latitude/longitude text fields into a GeoCoordinate.

    Raises:
        CoordinateParseError: If either field is not a number
        CoordinateRangeError: If the numbers are out of range
    """
    return GeoCoordinate(parse_degrees(lat_text), parse_degrees(lon_text))
