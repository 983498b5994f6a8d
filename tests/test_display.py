#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pytest",
# ]
# ///
"""Test display formatting, text parsing and map links."""

import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hamtools.display import (format_angle, format_coordinate, format_distance,
                              format_heading, parse_coordinate, parse_degrees)
from hamtools.errors import CoordinateParseError, CoordinateRangeError
from hamtools.geo_utils import GeoCoordinate
from hamtools.map_links import (amap_link, baidu_maps_link, geo_uri, google_maps_link,
                                map_link, tencent_maps_link)

W1AW = GeoCoordinate(41.714775, -72.72726)


def test_formats():
    assert format_angle(90) == "90.0°"
    assert format_angle(45.04) == "45.0°"
    assert format_distance(1234.56) == "1234.6 km"
    assert format_distance(0) == "0.0 km"
    assert format_coordinate(0.02083333333) == "0.020833"
    assert format_coordinate(-72.72726) == "-72.727260"


def test_format_heading():
    assert format_heading(45.4) == "45°"
    assert format_heading(359.6) == "0°"
    assert format_heading(-90.0) == "270°"


def test_parse_degrees():
    assert parse_degrees(" 12.5 ") == 12.5
    assert parse_degrees("-72.72726") == -72.72726

    for bad in ["", "abc", "12,5", "N41"]:
        with pytest.raises(CoordinateParseError):
            parse_degrees(bad)


def test_parse_coordinate():
    assert parse_coordinate("41.714775", "-72.72726") == W1AW

    with pytest.raises(CoordinateParseError):
        parse_coordinate("x", "0")
    with pytest.raises(CoordinateRangeError):
        parse_coordinate("91", "0")


def test_map_links():
    """Test link templates for each provider."""
    assert google_maps_link(W1AW, "W1AW") == "https://www.google.com/maps?q=41.714775,-72.727260(W1AW)"
    assert amap_link(W1AW, "W1AW") == (
        "https://uri.amap.com/marker?position=-72.727260,41.714775"
        "&name=W1AW&coordinate=gaode&callnative=1")
    assert tencent_maps_link(W1AW, "W1AW") == (
        "https://apis.map.qq.com/uri/v1/marker?marker=coord:41.714775,-72.727260;"
        "title:W1AW&coord_type=1")
    assert baidu_maps_link(W1AW, "W1AW") == (
        "http://api.map.baidu.com/marker?location=41.714775,-72.727260"
        "&title=W1AW&content=W1AW&output=html")
    assert geo_uri(W1AW, "W1AW") == "geo:41.714775,-72.727260?q=41.714775,-72.727260(W1AW)"


def test_map_link_dispatch():
    assert map_link("GEO", (0, 0), "Home") == "geo:0.000000,0.000000?q=0.000000,0.000000(Home)"
    assert map_link("google", W1AW) == google_maps_link(W1AW)

    with pytest.raises(ValueError):
        map_link("bing", W1AW)


def test_map_link_label_is_quoted():
    assert google_maps_link((0, 0), "Field Day") == "https://www.google.com/maps?q=0.000000,0.000000(Field%20Day)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
