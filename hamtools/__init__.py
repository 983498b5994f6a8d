"""Ham Radio Tools - bearing, distance and Maidenhead locator utilities."""

from .errors import CoordinateRangeError, LocatorFormatError, CoordinateParseError
from .geo_utils import (GeoCoordinate, calc_bearing, calc_distance_km, calc_antenna_direction,
                        bearing_to_direction, normalize_bearing, azimuth_to_heading)
from .maidenhead import latlon_to_grid, grid_to_latlon, is_valid_locator, normalize_locator
from .direction import DirectionResult, resolve_direction
from .tracker import SampleStream, DirectionTracker
from .config import load_config, save_config, home_coordinate

__all__ = [
    # Errors
    'CoordinateRangeError',
    'LocatorFormatError',
    'CoordinateParseError',
    # Geo utilities
    'GeoCoordinate',
    'calc_bearing',
    'calc_distance_km',
    'calc_antenna_direction',
    'bearing_to_direction',
    'normalize_bearing',
    'azimuth_to_heading',
    # Maidenhead
    'latlon_to_grid',
    'grid_to_latlon',
    'is_valid_locator',
    'normalize_locator',
    # Direction
    'DirectionResult',
    'resolve_direction',
    'SampleStream',
    'DirectionTracker',
    # Config
    'load_config',
    'save_config',
    'home_coordinate',
]
