"""Maidenhead grid square distance and bearing calculator."""

from .locator import Coordinate, InvalidGridError, grid_to_latlon, latlon_to_grid, is_valid_grid
from .geodesy import (Unit, DistanceResult, earth_radius, unit_label, parse_unit,
                      calc_distance, calc_bearing, calculate,
                      grid_distance, grid_bearing, grid_calculate)
from .direction import bearing_to_direction
from .config import load_config, save_config

__all__ = [
    # Locator
    'Coordinate',
    'InvalidGridError',
    'grid_to_latlon',
    'latlon_to_grid',
    'is_valid_grid',
    # Geodesy
    'Unit',
    'DistanceResult',
    'earth_radius',
    'unit_label',
    'parse_unit',
    'calc_distance',
    'calc_bearing',
    'calculate',
    'grid_distance',
    'grid_bearing',
    'grid_calculate',
    # Direction
    'bearing_to_direction',
    # Config
    'load_config',
    'save_config',
]
