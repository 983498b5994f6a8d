#!/usr/bin/env -S uv run
# -*- mode: python; -*-
# vim: set ft=python:
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pyyaml",
# ]
# ///
"""hamtool.py - Grid locators, beam headings and map links

Usage:
  hamtool.py grid <lat> <lon> [-p PAIRS]          # coordinate -> locator
  hamtool.py locate <locator>                     # locator -> cell center + map link
  hamtool.py bearing <target> [--from SRC] [--heading DEG]
  hamtool.py map <target> [--provider P] [--label L]
  hamtool.py --dump-config                        # emit default config to stdout

Targets and --from take a 6-character locator (FN31pr) or "lat,lon".
--from defaults to the grid in the config file. A target starting with a
minus sign must follow "--", e.g. hamtool.py bearing -- -33.87,151.21

Heading is used as-is (true north). Correct magnetic compass readings for
declination before passing them in.

Examples:
  hamtool.py grid 41.714775 -72.72726             # FN31PR
  hamtool.py locate cm98kq                        # 38.6875, -121.1250
  hamtool.py bearing IO91WL --from CM98KQ --heading 10

Config file: ~/.config/ham-radio-tools/config.yaml
  callsign: N0CALL
  grid: CM98KQ
  map_provider: google
  map_label: Location
"""

import argparse
import sys
from pathlib import Path

import yaml

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hamtools.config import DEFAULT_CONFIG, load_config, home_coordinate
from hamtools.direction import resolve_direction
from hamtools.display import (format_angle, format_coordinate, format_distance,
                              format_heading, parse_coordinate, parse_degrees)
from hamtools.errors import LocatorFormatError
from hamtools.geo_utils import GeoCoordinate
from hamtools.maidenhead import grid_to_latlon, is_valid_locator, latlon_to_grid
from hamtools.map_links import MAP_PROVIDERS, map_link


def parse_target(text: str) -> GeoCoordinate:
    """Parse a locator or "lat,lon" string into a coordinate."""
    if is_valid_locator(text):
        return grid_to_latlon(text)
    if "," in text:
        lat_text, lon_text = text.split(",", 1)
        return parse_coordinate(lat_text, lon_text)
    raise LocatorFormatError(f"Not a 6-character locator or lat,lon: {text!r}")


def cmd_grid(lat: str, lon: str, pairs: int):
    coord = parse_coordinate(lat, lon)
    print(latlon_to_grid(coord, precision=pairs))


def cmd_locate(locator: str, cfg: dict):
    coord = grid_to_latlon(locator)
    print(f"Locator:  {locator.strip().upper()}")
    print(f"Center:   {format_coordinate(coord.latitude)}, {format_coordinate(coord.longitude)}")
    print(f"Map:      {map_link(cfg['map_provider'], coord, cfg['map_label'])}")


def cmd_bearing(target: str, source: str | None, heading: str | None, cfg: dict):
    start = parse_target(source) if source else home_coordinate(cfg)
    end = parse_target(target)
    heading_deg = parse_degrees(heading) if heading is not None else None

    result = resolve_direction(start, end, heading_deg)

    print(f"From:     {latlon_to_grid(start)} ({format_coordinate(start.latitude)}, {format_coordinate(start.longitude)})")
    print(f"To:       {latlon_to_grid(end)} ({format_coordinate(end.latitude)}, {format_coordinate(end.longitude)})")
    print(f"Bearing:  {format_angle(result.bearing)} ({result.compass_point})")
    print(f"Distance: {format_distance(result.distance_km)}")
    if result.antenna_direction is not None:
        print(f"Heading:  {format_heading(heading_deg)}")
        print(f"Antenna:  {format_angle(result.antenna_direction)} clockwise from current heading")


def cmd_map(target: str, provider: str | None, label: str | None, cfg: dict):
    coord = parse_target(target)
    print(map_link(provider or cfg["map_provider"], coord, label or cfg["map_label"]))


def main():
    p = argparse.ArgumentParser(description="Grid locators, beam headings and map links")
    p.add_argument("--config", type=Path, help="Config file")
    p.add_argument("--dump-config", action="store_true", help="Emit default config to stdout")
    sub = p.add_subparsers(dest="command")

    g = sub.add_parser("grid", help="Coordinate to Maidenhead locator")
    g.add_argument("lat")
    g.add_argument("lon")
    g.add_argument("-p", "--pairs", type=int, default=3, choices=[1, 2, 3],
                   help="Character pairs (default: 3)")

    loc = sub.add_parser("locate", help="Locator to cell center")
    loc.add_argument("locator")

    b = sub.add_parser("bearing", help="Bearing and distance to a target")
    b.add_argument("target")
    b.add_argument("--from", dest="source", help="Starting locator or lat,lon (default: config grid)")
    b.add_argument("--heading", help="Current compass heading in degrees")

    m = sub.add_parser("map", help="Map link for a target")
    m.add_argument("target")
    m.add_argument("--provider", choices=MAP_PROVIDERS.keys(), help="Map provider")
    m.add_argument("--label", help="Marker label")

    args = p.parse_args()

    if args.dump_config:
        print(yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False))
        sys.exit(0)

    if not args.command:
        p.error("command is required unless --dump-config")

    cfg = load_config(args.config)

    try:
        if args.command == "grid":
            cmd_grid(args.lat, args.lon, args.pairs)
        elif args.command == "locate":
            cmd_locate(args.locator, cfg)
        elif args.command == "bearing":
            cmd_bearing(args.target, args.source, args.heading, cfg)
        elif args.command == "map":
            cmd_map(args.target, args.provider, args.label, cfg)
    except ValueError as e:
        sys.exit(f"Error: {e}")


if __name__ == "__main__":
    main()
