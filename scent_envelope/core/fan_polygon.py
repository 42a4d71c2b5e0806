"""
Fan polygons approximating a directional cone in geographic coordinates.
"""

from typing import List, Optional
import math

import numpy as np

from ..utils.geo_utils import move_point
from .model_parameters import ModelParameters, get_model_parameters


class FanPolygonBuilder:
    """Builds closed fan polygons: LKP -> arc -> LKP.

    The far edge is an arc sampled at equal angular steps rather than a
    straight chord, which tracks angular spread better near the envelope's
    extremities.

    Args:
        arc_points: Number of equal angular steps across the arc; the arc
            is sampled at ``arc_points + 1`` bearings including both ends
    """

    def __init__(self, arc_points: Optional[int] = None,
                 params: Optional[ModelParameters] = None):
        params = params or get_model_parameters()
        self.arc_points = max(1, int(arc_points if arc_points is not None else params.arc_points))

    def arc_bearings(self, axis_deg: float, length_m: float, width_m: float) -> np.ndarray:
        """Bearings (degrees) sampled across the fan, in increasing order."""
        half_angle = math.degrees(math.atan2(width_m, length_m))
        return np.linspace(axis_deg - half_angle, axis_deg + half_angle, self.arc_points + 1)

    def build(self, lkp, axis_deg: float, length_m: float, width_m: float) -> List:
        """Closed polygon whose first and last vertices are the LKP.

        Args:
            lkp: GeoPoint at the apex
            axis_deg: Downwind axis bearing (degrees)
            length_m: Fan radius in meters
            width_m: End width in meters, sets the half angle

        Returns:
            List of GeoPoints
        """
        poly = [lkp]
        for bearing in self.arc_bearings(axis_deg, length_m, width_m):
            poly.append(move_point(lkp, float(bearing), length_m))
        poly.append(lkp)
        return poly
