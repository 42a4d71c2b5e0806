"""
Recommended K9 deployment points along the downwind axis.
"""

from typing import List, Optional

from ..utils.geo_utils import move_point
from .conditions import StartPoint
from .model_parameters import ModelParameters, get_model_parameters

IMMEDIATE = "Immediate"
CORE_MIDLINE = "Core Midline"
CORE_FAR = "Core Far"


class StartPointPlanner:
    """Places start points nearest to farthest from the LKP."""

    def __init__(self, params: Optional[ModelParameters] = None):
        self.params = params or get_model_parameters()

    def plan(self, lkp, axis_deg: float, length_m: float) -> List[StartPoint]:
        near, far = self.params.start_point_fractions
        return [
            StartPoint(label=IMMEDIATE, point=lkp),
            StartPoint(label=CORE_MIDLINE, point=move_point(lkp, axis_deg, near * length_m)),
            StartPoint(label=CORE_FAR, point=move_point(lkp, axis_deg, far * length_m)),
        ]
