#!/usr/bin/env -S uv run
# -*- mode: python; -*-
# vim: set ft=python:
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pyyaml",
# ]
# ///
"""grid_calc.py - Distance and bearing between Maidenhead grid squares

Grid squares are decoded to the center of their cell, then the great-circle
distance (Haversine, spherical Earth) and the initial bearing in both
directions are calculated.

Precision:
  FN        field            20 deg x 10 deg
  FN42      square            2 deg x 1 deg
  FN42hn    subsquare         5' x 2.5'
  FN42hn35  extended square   30" x 15"

Config file: ~/.config/gridcalc/config.yaml
  unit: km          # km, mi, or nm
  verbose: false

Usage:
  grid_calc.py                         # run example calculations
  grid_calc.py FN42 JO01               # distance in km
  grid_calc.py FN42hn DM13at -u mi     # distance in miles
  grid_calc.py CN87 CN88 --verbose     # coordinates, all units, bearings
  grid_calc.py --dump-config           # emit default config to stdout

Dependencies: pyyaml
"""

import argparse
import sys
import yaml
from pathlib import Path

from gridcalc.config import DEFAULT_CONFIG, load_config
from gridcalc.direction import bearing_to_direction
from gridcalc.geodesy import Unit, calc_distance, grid_calculate, parse_unit, unit_label
from gridcalc.locator import InvalidGridError

EXAMPLES = [
    ("FN42", "JO01", "Boston area to London area"),
    ("FN42hn", "DM13at", "Massachusetts to Arizona"),
    ("CN87", "CN88", "Adjacent grid squares"),
    ("JN25", "QF22", "Europe to Australia"),
]

EPILOG = """\
Examples:
  %(prog)s FN42 JO01
  %(prog)s FN42hn DM13at --unit mi
  %(prog)s CN87 CN88 --verbose
"""


class GridArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors with usage and exit status 1."""

    def error(self, message):
        print(f"Error: {message}", file=sys.stderr)
        self.print_help(sys.stderr)
        sys.exit(1)


def build_parser() -> GridArgumentParser:
    p = GridArgumentParser(
        description="Calculate distance and bearing between Maidenhead grid squares",
        usage="%(prog)s GRID1 GRID2 [OPTIONS]",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("grids", nargs="*", metavar="GRID",
                   help="Grid squares, e.g. FN42 or FN42hn (exactly two)")
    p.add_argument("-u", "--unit", choices=[u.value for u in Unit],
                   help="Distance unit: km, mi, nm (default: km)")
    p.add_argument("-v", "--verbose", action="store_true", help="Show detailed information")
    p.add_argument("--config", type=Path, help="Config file (YAML)")
    p.add_argument("--dump-config", action="store_true", help="Emit default config to stdout")
    return p


def print_verbose_result(grid1, grid2, result):
    """Print coordinates, distance in every unit, and both bearings."""
    src, dst = result.origin, result.destination
    print(f"From: {grid1:<8} ({src.latitude:8.3f}°, {src.longitude:9.3f}°)")
    print(f"To:   {grid2:<8} ({dst.latitude:8.3f}°, {dst.longitude:9.3f}°)")
    print()

    print("Distance:")
    for unit in Unit:
        dist = calc_distance(src, dst, unit)
        print(f"  {dist:10.1f} {unit_label(unit)}")
    print()

    print(f"Bearing:      {result.bearing:5.1f}° ({bearing_to_direction(result.bearing)})")
    print(f"Back Bearing: {result.back_bearing:5.1f}° ({bearing_to_direction(result.back_bearing)})")


def print_simple_result(distance: float, unit: Unit):
    print(f"{distance:.1f} {unit_label(unit)}")


def run_examples():
    """Print a fixed set of example calculations."""
    print("=" * 70)
    print("Maidenhead Grid Square Distance Calculator")
    print("=" * 70)
    print()
    print("Example Calculations:")
    print("-" * 70)

    for grid1, grid2, description in EXAMPLES:
        try:
            result = grid_calculate(grid1, grid2, Unit.KILOMETERS)
            dist_mi = calc_distance(result.origin, result.destination, Unit.MILES)
            dist_nm = calc_distance(result.origin, result.destination, Unit.NAUTICAL_MILES)
        except InvalidGridError as e:
            print(f"\n{description}: Error - {e}")
            continue

        src, dst = result.origin, result.destination
        print(f"\n{description}")
        print(f"  From: {grid1:<8} ({src.latitude:7.3f}°, {src.longitude:8.3f}°)")
        print(f"  To:   {grid2:<8} ({dst.latitude:7.3f}°, {dst.longitude:8.3f}°)")
        print(f"  Distance: {result.distance:.1f} km ({dist_mi:.1f} mi, {dist_nm:.1f} nm)")
        print(f"  Bearing:  {result.bearing:.1f}° ({bearing_to_direction(result.bearing)})")

    print()
    print("=" * 70)


def main(argv: list[str] | None = None):
    if argv is None:
        argv = sys.argv[1:]

    p = build_parser()

    if not argv:
        run_examples()
        print(f"\nFor command-line usage, run: {p.prog} --help")
        return

    args = p.parse_intermixed_args(argv)

    if args.dump_config:
        print(yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False), end="")
        return

    if len(args.grids) > 2:
        p.error("Too many arguments")
    if len(args.grids) < 2:
        p.error("Both GRID1 and GRID2 are required")
    grid1, grid2 = args.grids

    cfg = load_config(args.config)
    try:
        unit = parse_unit(args.unit or str(cfg["unit"]))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(cfg["verbose"], bool):
        print(f"Error: Config value verbose must be true or false (got {cfg['verbose']!r})", file=sys.stderr)
        sys.exit(1)
    verbose = args.verbose or cfg["verbose"]

    try:
        result = grid_calculate(grid1, grid2, unit)
    except InvalidGridError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if verbose:
        print_verbose_result(grid1, grid2, result)
    else:
        print_simple_result(result.distance, unit)


if __name__ == "__main__":
    main()
