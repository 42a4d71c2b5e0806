"""
Geometry and unit helpers shared by the envelope and cone modules.
"""

from .geo_utils import (
    meters_per_degree_lat,
    meters_per_degree_lon,
    move_point,
    downwind_deg,
    zone_polygon,
)
from .trig_utils import deg_to_rad, rotate_point, mps_to_mph, mph_to_mps, clamp

__all__ = [
    'meters_per_degree_lat',
    'meters_per_degree_lon',
    'move_point',
    'downwind_deg',
    'zone_polygon',
    'deg_to_rad',
    'rotate_point',
    'mps_to_mph',
    'mph_to_mps',
    'clamp',
]
