"""Great-circle distance and bearing calculations on a spherical Earth."""

import math
from dataclasses import dataclass
from enum import Enum

from .locator import Coordinate, grid_to_latlon


class Unit(Enum):
    """Distance units."""

    KILOMETERS = "km"
    MILES = "mi"
    NAUTICAL_MILES = "nm"


# Mean Earth radius per unit (sphere, not ellipsoid)
EARTH_RADIUS = {
    Unit.KILOMETERS: 6371.0,
    Unit.MILES: 3959.0,
    Unit.NAUTICAL_MILES: 3440.0,
}

UNIT_LABELS = {
    Unit.KILOMETERS: "km",
    Unit.MILES: "miles",
    Unit.NAUTICAL_MILES: "nm",
}


@dataclass(frozen=True)
class DistanceResult:
    """Distance and bearings between two coordinates."""

    distance: float
    bearing: float
    back_bearing: float
    origin: Coordinate
    destination: Coordinate


def earth_radius(unit: Unit) -> float:
    """Earth radius in the given unit."""
    return EARTH_RADIUS[unit]


def unit_label(unit: Unit) -> str:
    """Display label for a unit (km, miles, nm)."""
    return UNIT_LABELS[unit]


def parse_unit(text: str) -> Unit:
    """Convert a unit token (km, mi, nm) to a Unit.

    Raises:
        ValueError: If the token is not a known unit
    """
    try:
        return Unit(text.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown unit '{text}'. Use km, mi, or nm.") from None


def normalize_angle(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    angle = math.fmod(angle, 360.0)
    if angle < 0:
        angle += 360.0
    return angle


def calc_distance(a: Coordinate, b: Coordinate, unit: Unit = Unit.KILOMETERS) -> float:
    """Calculate great-circle distance between two points (Haversine).

    Args:
        a: Starting coordinate
        b: Ending coordinate
        unit: Distance unit (default: kilometers)

    Returns:
        Distance in the requested unit
    """
    R = earth_radius(unit)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)
    h = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1-h))
    return R * c


def calc_bearing(a: Coordinate, b: Coordinate) -> float:
    """Calculate initial bearing from point a to point b in degrees.

    Coincident points give 0.

    Args:
        a: Starting coordinate
        b: Ending coordinate

    Returns:
        Bearing in degrees (0-360)
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)
    x = math.sin(dlon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    bearing = math.atan2(x, y)
    return normalize_angle(math.degrees(bearing))


def calculate(a: Coordinate, b: Coordinate, unit: Unit = Unit.KILOMETERS) -> DistanceResult:
    """Calculate distance, bearing and back bearing between two coordinates.

    The back bearing is the initial bearing from b to a, computed on its own
    rather than as bearing + 180.
    """
    return DistanceResult(
        distance=calc_distance(a, b, unit),
        bearing=calc_bearing(a, b),
        back_bearing=calc_bearing(b, a),
        origin=a,
        destination=b,
    )


def grid_distance(grid1: str, grid2: str, unit: Unit = Unit.KILOMETERS) -> float:
    """Distance between the centers of two grid squares."""
    return calc_distance(grid_to_latlon(grid1), grid_to_latlon(grid2), unit)


def grid_bearing(grid1: str, grid2: str) -> float:
    """Initial bearing from the center of grid1 to the center of grid2."""
    return calc_bearing(grid_to_latlon(grid1), grid_to_latlon(grid2))


def grid_calculate(grid1: str, grid2: str, unit: Unit = Unit.KILOMETERS) -> DistanceResult:
    """Decode both grid squares, then calculate distance and bearings.

    Raises:
        InvalidGridError: If either grid square is invalid
    """
    return calculate(grid_to_latlon(grid1), grid_to_latlon(grid2), unit)
