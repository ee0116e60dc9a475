"""Compass direction labels for bearings."""

import math

DIRECTIONS = ("N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
              "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW")


def bearing_to_direction(bearing: float) -> str:
    """Convert bearing to compass direction.

    Sectors are 22.5 degrees wide and centered on each label, so a bearing
    exactly on a sector edge goes to the next label clockwise.

    Args:
        bearing: Bearing in degrees (any value, wrapped into 0-360)

    Returns:
        Compass direction (N, NNE, NE, etc.)
    """
    bearing %= 360
    idx = math.floor(bearing / 22.5 + 0.5) % 16
    return DIRECTIONS[idx]
