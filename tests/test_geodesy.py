#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "pytest",
# ]
# ///
"""Test distance and bearing functions for correctness on spherical Earth."""

import dataclasses
import math
import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridcalc.locator import Coordinate, InvalidGridError, grid_to_latlon
from gridcalc.geodesy import (Unit, DistanceResult, earth_radius, unit_label, parse_unit,
                              normalize_angle, calc_distance, calc_bearing, calculate,
                              grid_distance, grid_bearing, grid_calculate)


def test_bearing_known_values():
    """Test bearing calculation with known geographic cases."""

    # Due East from equator
    bearing = calc_bearing(Coordinate(0, 0), Coordinate(0, 90))
    print(f"Test 1 - Due East from equator: {bearing:.1f}° (expected: 90.0°)")
    assert abs(bearing - 90.0) < 0.1

    # Due North
    bearing = calc_bearing(Coordinate(0, 0), Coordinate(45, 0))
    print(f"Test 2 - Due North: {bearing:.1f}° (expected: 0.0°)")
    assert abs(bearing - 0.0) < 0.1

    # Due South
    bearing = calc_bearing(Coordinate(45, 0), Coordinate(0, 0))
    print(f"Test 3 - Due South: {bearing:.1f}° (expected: 180.0°)")
    assert abs(bearing - 180.0) < 0.1

    # Due West from equator
    bearing = calc_bearing(Coordinate(0, 90), Coordinate(0, 0))
    print(f"Test 4 - Due West: {bearing:.1f}° (expected: 270.0°)")
    assert abs(bearing - 270.0) < 0.1

    # Folsom, CA to London, UK - roughly northeast
    bearing = calc_bearing(Coordinate(38.6, -121.2), Coordinate(51.5, -0.2))
    print(f"Test 5 - Folsom to London: {bearing:.1f}° (expected: ~35-45° NE)")
    assert 30 < bearing < 50

    # Halfway around equator, initial heading is due East
    bearing = calc_bearing(Coordinate(0, 0), Coordinate(0, 180))
    print(f"Test 6 - Halfway around equator: {bearing:.1f}° (expected: 90.0°)")
    assert abs(bearing - 90.0) < 0.1

    print("\n✅ All bearing tests passed - formula is correct for spherical Earth!")


def test_bearing_range():
    """Bearings are always within [0, 360)."""
    points = [grid_to_latlon(g) for g in ("FN42", "JO01", "QF22", "AA00", "RR99", "CN87")]
    for a in points:
        for b in points:
            bearing = calc_bearing(a, b)
            assert 0 <= bearing < 360


def test_coincident_points():
    """Same point gives zero distance and a 0° bearing, not an error."""
    coord = grid_to_latlon("FN42hn")
    assert calc_distance(coord, coord) == 0.0
    assert calc_bearing(coord, coord) == 0.0
    for grid in ("JO", "CN87", "FN42hn", "RR99xx99"):
        for unit in Unit:
            assert grid_distance(grid, grid, unit) == 0.0


def test_distance_known_values():
    """Test distance calculation with known values."""
    R = 6371.0

    dist = calc_distance(Coordinate(0, 0), Coordinate(0, 90))
    print(f"\nTest 1 - Quarter equator: {dist:.0f} km (expected: ~10,008 km)")
    assert dist == pytest.approx(R * math.pi / 2)

    dist = calc_distance(Coordinate(0, 0), Coordinate(0, 180))
    print(f"Test 2 - Half equator: {dist:.0f} km (expected: ~20,015 km)")
    assert dist == pytest.approx(R * math.pi)

    dist = calc_distance(Coordinate(0, 0), Coordinate(90, 0))
    print(f"Test 3 - Equator to pole: {dist:.0f} km (expected: ~10,008 km)")
    assert dist == pytest.approx(R * math.pi / 2)

    dist = calc_distance(Coordinate(38.6, -121.2), Coordinate(51.5, -0.2))
    print(f"Test 4 - Folsom to London: {dist:.0f} km (expected: ~8,600 km)")
    assert abs(dist - 8600) < 200

    print("\n✅ All distance tests passed - Haversine formula is correct!")


def test_distance_symmetric():
    """distance(a, b) == distance(b, a) for every unit."""
    pairs = [("FN42", "JO01"), ("FN42hn", "DM13at"), ("JN25", "QF22"), ("AA00", "RR99")]
    for g1, g2 in pairs:
        for unit in Unit:
            assert grid_distance(g1, g2, unit) == pytest.approx(grid_distance(g2, g1, unit), rel=1e-12)


def test_unit_conversion_consistency():
    """Miles and nautical miles scale with the radius ratio."""
    km = grid_distance("FN42", "JO01", Unit.KILOMETERS)
    mi = grid_distance("FN42", "JO01", Unit.MILES)
    nm = grid_distance("FN42", "JO01", Unit.NAUTICAL_MILES)
    print(f"  FN42 → JO01: {km:.1f} km, {mi:.1f} mi, {nm:.1f} nm")
    assert mi == pytest.approx(km * 3959.0 / 6371.0)
    assert nm == pytest.approx(km * 3440.0 / 6371.0)


def test_boston_to_london():
    """FN42 to JO01 at square precision."""
    result = grid_calculate("FN42", "JO01")

    assert result.origin == Coordinate(42.5, -71.0)
    assert result.destination == Coordinate(51.5, 1.0)
    print(f"  FN42 → JO01: {result.distance:.3f} km, {result.bearing:.2f}° / {result.back_bearing:.2f}°")
    assert result.distance == pytest.approx(5325.2, abs=3)
    assert 40 < result.bearing < 60          # Northeast across the Atlantic
    assert 270 < result.back_bearing < 300   # West-northwest back

    # Same inputs reproduce the same numbers exactly
    again = grid_calculate("FN42", "JO01")
    assert again == result


def test_back_bearing_computed_independently():
    """Back bearing is the forward bearing from the destination, not bearing + 180."""
    result = grid_calculate("FN42", "JO01")
    a, b = result.origin, result.destination

    assert result.back_bearing == calc_bearing(b, a)
    assert abs(result.back_bearing - (result.bearing + 180) % 360) > 1.0


def test_adjacent_squares():
    """CN87 to CN88 differ by one degree of latitude."""
    result = grid_calculate("CN87", "CN88")

    assert result.distance == pytest.approx(6371.0 * math.radians(1.0))
    assert 110 < result.distance < 112
    assert result.bearing == 0.0
    assert result.back_bearing == 180.0


def test_calculate_bundles_everything():
    a = grid_to_latlon("FN42hn")
    b = grid_to_latlon("DM13at")
    result = calculate(a, b, Unit.MILES)

    assert isinstance(result, DistanceResult)
    assert result.origin == a
    assert result.destination == b
    assert result.distance == calc_distance(a, b, Unit.MILES)
    assert result.bearing == calc_bearing(a, b)
    assert result.back_bearing == calc_bearing(b, a)
    assert grid_bearing("FN42hn", "DM13at") == result.bearing

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.distance = 0.0


def test_grid_functions_propagate_errors():
    with pytest.raises(InvalidGridError):
        grid_distance("FN42", "12")
    with pytest.raises(InvalidGridError):
        grid_bearing("AB1C", "FN42")
    with pytest.raises(InvalidGridError):
        grid_calculate("FN42", "FN4")


def test_units():
    assert earth_radius(Unit.KILOMETERS) == 6371.0
    assert earth_radius(Unit.MILES) == 3959.0
    assert earth_radius(Unit.NAUTICAL_MILES) == 3440.0

    assert unit_label(Unit.KILOMETERS) == "km"
    assert unit_label(Unit.MILES) == "miles"
    assert unit_label(Unit.NAUTICAL_MILES) == "nm"

    assert parse_unit("km") is Unit.KILOMETERS
    assert parse_unit("MI") is Unit.MILES
    assert parse_unit(" nm ") is Unit.NAUTICAL_MILES
    with pytest.raises(ValueError, match="Unknown unit"):
        parse_unit("furlongs")


def test_normalize_angle():
    assert normalize_angle(0.0) == 0.0
    assert normalize_angle(360.0) == 0.0
    assert normalize_angle(-90.0) == 270.0
    assert normalize_angle(725.0) == 5.0
    assert normalize_angle(-180.0) == 180.0


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v", "-s"]))
