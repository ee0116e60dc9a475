"""Maidenhead grid square decoding and encoding."""

import string
from typing import NamedTuple


VALID_LENGTHS = (2, 4, 6, 8)

# (longitude step, latitude step) in degrees for each character pair
PAIR_STEPS = (
    (20.0, 10.0),           # Field
    (2.0, 1.0),             # Square
    (2.0 / 24, 1.0 / 24),   # Subsquare (5' x 2.5')
    (2.0 / 240, 1.0 / 240), # Extended square (30" x 15")
)


class InvalidGridError(ValueError):
    """Raised when a grid square string is not a valid Maidenhead locator."""


class Coordinate(NamedTuple):
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


def _is_letter(ch: str) -> bool:
    return ch in string.ascii_uppercase


def _is_digit(ch: str) -> bool:
    return ch in string.digits


def validate_grid(grid: str) -> str:
    """Normalize a grid square and check its structure.

    Args:
        grid: Maidenhead grid square (2, 4, 6, or 8 characters, any case)

    Returns:
        Uppercased, stripped grid square

    Raises:
        InvalidGridError: If length or character classes are wrong
    """
    grid = grid.strip()

    if len(grid) not in VALID_LENGTHS:
        raise InvalidGridError("Grid square must be 2, 4, 6, or 8 characters")
    # Non-ASCII letters stay as-is and fail the class checks below
    if grid.isascii():
        grid = grid.upper()
    if not (_is_letter(grid[0]) and _is_letter(grid[1])):
        raise InvalidGridError("First two characters must be letters")
    if len(grid) >= 4 and not (_is_digit(grid[2]) and _is_digit(grid[3])):
        raise InvalidGridError("Characters 3-4 must be digits")
    if len(grid) >= 6 and not (_is_letter(grid[4]) and _is_letter(grid[5])):
        raise InvalidGridError("Characters 5-6 must be letters")
    if len(grid) == 8 and not (_is_digit(grid[6]) and _is_digit(grid[7])):
        raise InvalidGridError("Characters 7-8 must be digits")

    return grid


def is_valid_grid(grid: str) -> bool:
    """Check whether a string is a decodable grid square."""
    try:
        validate_grid(grid)
    except InvalidGridError:
        return False
    return True


def grid_to_latlon(grid: str) -> Coordinate:
    """Convert Maidenhead grid to lat/lon (center of grid).

    Each character pair refines the position inside the cell given by the
    previous pairs. Letters count from 'A', digits from '0'.

    Args:
        grid: Maidenhead grid square (2, 4, 6, or 8 characters)

    Returns:
        Coordinate of the center of the grid cell

    Raises:
        InvalidGridError: If grid format is invalid
    """
    grid = validate_grid(grid)

    lon = -180.0
    lat = -90.0
    for level in range(len(grid) // 2):
        lon_char, lat_char = grid[2 * level], grid[2 * level + 1]
        base = ord('0') if level % 2 else ord('A')
        lon_step, lat_step = PAIR_STEPS[level]
        lon += (ord(lon_char) - base) * lon_step
        lat += (ord(lat_char) - base) * lat_step

    # Half a step of the finest level moves the SW corner to the center
    lon_step, lat_step = PAIR_STEPS[len(grid) // 2 - 1]
    lon += lon_step / 2
    lat += lat_step / 2

    return Coordinate(lat, lon)


def latlon_to_grid(lat: float, lon: float, precision: int = 6) -> str:
    """Convert lat/lon to a Maidenhead grid square.

    Args:
        lat: Latitude in degrees (-90 to 90)
        lon: Longitude in degrees (-180 to 180)
        precision: Number of characters (2, 4, 6, or 8)

    Returns:
        Grid square, e.g. "CM98kq" (subsquare letters in lower case)
    """
    if precision not in VALID_LENGTHS:
        raise ValueError(f"Precision must be 2, 4, 6, or 8 (got {precision})")
    if not -90 <= lat <= 90:
        raise ValueError(f"Latitude must be between -90 and 90 (got {lat})")
    if not -180 <= lon <= 180:
        raise ValueError(f"Longitude must be between -180 and 180 (got {lon})")

    lon_rem = lon + 180
    lat_rem = lat + 90
    chars = []
    for level in range(precision // 2):
        lon_step, lat_step = PAIR_STEPS[level]
        limit = 10 if level % 2 else (18 if level == 0 else 24)
        lon_idx = min(int(lon_rem // lon_step), limit - 1)
        lat_idx = min(int(lat_rem // lat_step), limit - 1)
        lon_rem -= lon_idx * lon_step
        lat_rem -= lat_idx * lat_step

        if level % 2:
            chars.append(f"{lon_idx}{lat_idx}")
        else:
            pair = chr(ord('A') + lon_idx) + chr(ord('A') + lat_idx)
            chars.append(pair.lower() if level == 2 else pair)

    return "".join(chars)
