#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pytest",
# ]
# ///
"""Test Maidenhead locator encoding, decoding and validation."""

import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hamtools.errors import CoordinateRangeError, LocatorFormatError
from hamtools.geo_utils import GeoCoordinate, calc_distance_km
from hamtools.maidenhead import (grid_to_latlon, is_valid_locator, latlon_to_grid,
                                 normalize_locator)


def test_latlon_to_grid_known_values():
    """Test encoding with known station locations."""

    test_cases = [
        ((0.0, 0.0), "JJ00AA"),                  # Origin
        ((41.714775, -72.727260), "FN31PR"),     # W1AW, Newington CT
        ((-33.8688, 151.2093), "QF56OD"),        # Sydney
        ((-34.6037, -58.3816), "GF05TJ"),        # Buenos Aires
        ((-80.0, -160.0), "BB00AA"),             # Exactly on a field corner
        ((-80.0001, -160.0001), "AA99XX"),       # Just below/left of it
        ((-90.0, -180.0), "AA00AA"),             # South-west corner of the grid
        ((90.0, 180.0), "RR99XX"),               # North-east edge stays inside R/9/X
    ]

    print("\nEncoding tests:")
    for (lat, lon), expected in test_cases:
        grid = latlon_to_grid(GeoCoordinate(lat, lon))
        print(f"  ({lat}, {lon}) → {grid} (expected: {expected})")
        assert grid == expected


def test_latlon_to_grid_precision():
    assert latlon_to_grid((41.714775, -72.727260), precision=1) == "FN"
    assert latlon_to_grid((41.714775, -72.727260), precision=2) == "FN31"
    assert latlon_to_grid((41.714775, -72.727260)) == "FN31PR"

    with pytest.raises(ValueError):
        latlon_to_grid((0, 0), precision=4)
    with pytest.raises(ValueError):
        latlon_to_grid((0, 0), precision=0)


def test_latlon_to_grid_out_of_range():
    with pytest.raises(CoordinateRangeError):
        latlon_to_grid((91.0, 0.0))
    with pytest.raises(CoordinateRangeError):
        latlon_to_grid((0.0, -180.5))


def test_grid_to_latlon():
    """Test decoding to cell centers."""

    center = grid_to_latlon("JJ00AA")
    print(f"\n  JJ00AA: ({center.latitude:.7f}°, {center.longitude:.7f}°)")
    assert center.latitude == pytest.approx(0.0208333, abs=1e-7)
    assert center.longitude == pytest.approx(0.0416667, abs=1e-7)

    # Values are grid CENTER, not exact city location
    test_cases = [
        ("CM98kq", 38.6875, -121.125),      # Folsom area
        ("CN88ra", 48.0208, -122.5417),     # Freeland area
    ]
    for grid, exp_lat, exp_lon in test_cases:
        lat, lon = grid_to_latlon(grid)
        print(f"  {grid}: ({lat:.4f}°, {lon:.4f}°) - expected: ({exp_lat:.4f}°, {exp_lon:.4f}°)")
        assert lat == pytest.approx(exp_lat, abs=1e-4)
        assert lon == pytest.approx(exp_lon, abs=1e-4)


def test_grid_to_latlon_case_and_whitespace():
    assert grid_to_latlon("  fn31pr ") == grid_to_latlon("FN31PR")


@pytest.mark.parametrize("locator", ["ZZ99ZZ", "FN31", "FN31PR7", "", "FN3APR", "FN31P!", "SA00AA"])
def test_grid_to_latlon_rejects_invalid(locator):
    with pytest.raises(LocatorFormatError):
        grid_to_latlon(locator)


def test_is_valid_locator():
    """Test locator syntax checks."""

    test_cases = [
        ("AA00AA", True),
        ("RR99XX", True),
        ("fn31pr", True),
        ("Fn31Pr", True),
        (" FN31PR ", True),
        ("ZZ99ZZ", False),    # field must be <= R, subsquare <= X
        ("SA00AA", False),
        ("AS00AA", False),
        ("AA00YA", False),
        ("AA00AY", False),
        ("AAA0AA", False),
        ("AA0AAA", False),
        ("FN31", False),
        ("FN31PR00", False),
        ("", False),
        (None, False),
    ]

    for locator, expected in test_cases:
        result = is_valid_locator(locator)
        print(f"  {locator!r}: {result} (expected: {expected})")
        assert result == expected


def test_normalize_locator():
    assert normalize_locator(" cm98kq") == "CM98KQ"
    with pytest.raises(LocatorFormatError):
        normalize_locator("CM98")


def test_quantization_bound():
    """Decoded cell center stays within half a subsquare of the input."""
    # Half-diagonal of a 5' x 2.5' cell at the equator
    half_diagonal_km = calc_distance_km((0, 0), (1.25 / 60, 2.5 / 60))
    assert half_diagonal_km == pytest.approx(5.18, abs=0.01)

    lats = [-89.99, -60.123, -33.8688, -0.001, 0.0, 12.3456, 41.714775, 70.5, 89.99]
    lons = [-179.99, -121.2, -72.72726, -0.0001, 0.0, 2.3522, 99.999, 151.2093, 179.99]
    for lat in lats:
        for lon in lons:
            center = grid_to_latlon(latlon_to_grid((lat, lon)))
            assert calc_distance_km((lat, lon), center) <= half_diagonal_km + 1e-9
            assert abs(center.latitude - lat) <= 1.25 / 60 + 1e-9
            assert abs(center.longitude - lon) <= 2.5 / 60 + 1e-9


def test_center_encodes_to_same_locator():
    for grid in ["JJ00AA", "FN31PR", "QF56OD", "GF05TJ", "AA00AA", "RR99XX", "CM98KQ"]:
        assert latlon_to_grid(grid_to_latlon(grid)) == grid


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
