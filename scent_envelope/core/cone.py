"""
Screen-space directional cone overlay.

The cone is purely visual: a triangle from the source point opening
downwind, narrower at higher wind speeds.
"""

from typing import Union

from .conditions import Cone, ScreenPoint, WindObservation
from ..utils.geo_utils import downwind_deg
from ..utils.trig_utils import rotate_point

AUTO = "auto"


def default_half_angle_deg_from_mph(mph: float) -> float:
    # narrower with higher wind, wider with low wind
    if mph <= 3:
        return 28
    if mph <= 8:
        return 22
    if mph <= 14:
        return 18
    return 14


def resolve_half_angle(half_angle: Union[float, str], wind_mph: float) -> float:
    """Numeric half angle, or the wind-based default for ``"auto"``."""
    if isinstance(half_angle, str) and half_angle.strip().lower() == AUTO:
        return default_half_angle_deg_from_mph(wind_mph)
    return float(half_angle)


def compute_cone(source: ScreenPoint, length_px: float, half_angle_deg: float,
                 wind_from_deg: float) -> Cone:
    """Left, right and tip points of the cone around ``source``.

    The unrotated cone points along +x; it is then turned by the negative
    downwind bearing about the source.
    """
    down = downwind_deg(wind_from_deg)

    tip0 = ScreenPoint(x=source.x + length_px, y=source.y)
    left0 = rotate_point(source, tip0, -half_angle_deg)
    right0 = rotate_point(source, tip0, half_angle_deg)

    return Cone(
        left=rotate_point(source, left0, -down),
        right=rotate_point(source, right0, -down),
        tip=rotate_point(source, tip0, -down),
        downwind_deg=down,
    )


def compute_cone_for_wind(source: ScreenPoint, length_px: float,
                          half_angle: Union[float, str], wind: WindObservation) -> Cone:
    half_angle_deg = resolve_half_angle(half_angle, wind.speed_mph)
    return compute_cone(source, length_px, half_angle_deg, wind.from_deg)
