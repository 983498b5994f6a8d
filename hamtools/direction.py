"""Resolve bearing, distance and antenna direction for the display layer."""

from dataclasses import dataclass

from .geo_utils import (as_coordinate, bearing_to_direction, calc_antenna_direction,
                        calc_bearing, calc_distance_km)


@dataclass(frozen=True)
class DirectionResult:
    bearing: float
    distance_km: float
    antenna_direction: float | None = None

    @property
    def compass_point(self) -> str:
        return bearing_to_direction(self.bearing)


def resolve_direction(my_coord, target_coord, heading: float | None = None) -> DirectionResult | None:
    """Compute bearing/distance from my_coord to target_coord.

    Args:
        my_coord: My position (GeoCoordinate or (lat, lon)), or None if unknown
        target_coord: Target position, or None if not entered/unparsed
        heading: Current compass heading in degrees, or None if no sample yet

    Returns:
        DirectionResult, or None if either coordinate is missing. Without a
        heading the antenna_direction field is None.
    """
    if my_coord is None or target_coord is None:
        return None

    start = as_coordinate(my_coord)
    end = as_coordinate(target_coord)
    bearing = calc_bearing(start, end)
    distance = calc_distance_km(start, end)

    antenna = None
    if heading is not None:
        antenna = calc_antenna_direction(bearing, heading)

    return DirectionResult(bearing=bearing, distance_km=distance, antenna_direction=antenna)
