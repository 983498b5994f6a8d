"""Maidenhead grid locator encoding and decoding (6-character subsquares).

Structure, longitude and latitude characters interleaved:
    - Field (pair 1): A-R, 20° longitude x 10° latitude
    - Square (pair 2): 0-9, 2° longitude x 1° latitude
    - Subsquare (pair 3): A-X, 5' longitude x 2.5' latitude
"""

import math
import re

from .errors import LocatorFormatError
from .geo_utils import GeoCoordinate, as_coordinate

FIELDS = 18
SQUARES = 10
SUBSQUARES = 24

# Subsquares per degree: 5' longitude, 2.5' latitude
LON_CELLS_PER_DEG = 60 / 5
LAT_CELLS_PER_DEG = 60 / 2.5

LOCATOR_RE = re.compile(r'^[A-R]{2}[0-9]{2}[A-X]{2}$')


def _index_to_char(idx: int, limit: int) -> str:
    assert 0 <= idx < limit, f"locator index {idx} outside [0, {limit})"
    return chr(ord('A') + idx)


def _char_to_index(c: str) -> int:
    return ord(c) - ord('A')


def is_valid_locator(locator: str) -> bool:
    """Check locator syntax: AA00AA with A-R / 0-9 / A-X, any case.

    Surrounding whitespace is ignored.
    """
    if not isinstance(locator, str):
        return False
    return LOCATOR_RE.match(locator.strip().upper()) is not None


def normalize_locator(locator: str) -> str:
    """Return the trimmed uppercase locator, or raise LocatorFormatError."""
    if not is_valid_locator(locator):
        raise LocatorFormatError(f"Invalid Maidenhead locator: {locator!r}")
    return locator.strip().upper()


def latlon_to_grid(coord, precision: int = 3) -> str:
    """Convert a coordinate to the Maidenhead locator of the cell containing it.

    Args:
        coord: GeoCoordinate or (lat, lon)
        precision: Number of character pairs, 1-3 (3 gives "JJ00AA")

    Returns:
        Uppercase locator of 2 * precision characters

    Raises:
        CoordinateRangeError: If the coordinate is out of range
    """
    if precision not in (1, 2, 3):
        raise ValueError(f"Precision must be 1, 2 or 3 pairs, got {precision}")
    coord = as_coordinate(coord)

    # Subsquare index counted from the south-west corner of the grid.
    # lon=180 / lat=90 belong to the last cell.
    lon_cells = int(360 * LON_CELLS_PER_DEG)
    lat_cells = int(180 * LAT_CELLS_PER_DEG)
    lon_idx = min(math.floor((coord.longitude + 180.0) * LON_CELLS_PER_DEG), lon_cells - 1)
    lat_idx = min(math.floor((coord.latitude + 90.0) * LAT_CELLS_PER_DEG), lat_cells - 1)

    per_square = SUBSQUARES
    per_field = SUBSQUARES * SQUARES

    grid = _index_to_char(lon_idx // per_field, FIELDS) + _index_to_char(lat_idx // per_field, FIELDS)
    grid += str((lon_idx // per_square) % SQUARES) + str((lat_idx // per_square) % SQUARES)
    grid += _index_to_char(lon_idx % SUBSQUARES, SUBSQUARES) + _index_to_char(lat_idx % SUBSQUARES, SUBSQUARES)

    return grid[:2 * precision]


def grid_to_latlon(locator: str) -> GeoCoordinate:
    """Convert a 6-character Maidenhead locator to the center of its subsquare.

    Args:
        locator: Maidenhead locator, e.g. "FN31pr"

    Returns:
        GeoCoordinate of the cell center (not the original position)

    Raises:
        LocatorFormatError: If the locator is not valid
    """
    grid = normalize_locator(locator)

    lon = (_char_to_index(grid[0]) * 20.0
           + int(grid[2]) * 2.0
           + _char_to_index(grid[4]) * 5.0 / 60.0
           - 180.0)
    lat = (_char_to_index(grid[1]) * 10.0
           + int(grid[3]) * 1.0
           + _char_to_index(grid[5]) * 2.5 / 60.0
           - 90.0)

    # Half a subsquare to get to the center
    lon += 2.5 / 60.0
    lat += 1.25 / 60.0

    return GeoCoordinate(lat, lon)

