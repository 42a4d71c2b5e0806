"""
Trig and unit utilities for screen-space rotation and wind speed conversion.
"""

import math

MPS_TO_MPH = 2.236936


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def mps_to_mph(mps: float) -> float:
    return mps * MPS_TO_MPH


def mph_to_mps(mph: float) -> float:
    return mph / MPS_TO_MPH


def clamp(n: float, a: float, b: float) -> float:
    """Clamp n into [a, b]."""
    return max(a, min(b, n))


def rotate_point(origin, point, deg: float):
    """Rotate a screen point about an origin.

    Positive angles turn clockwise on a y-down surface. The rotation is an
    isometry, so the distance from ``origin`` to ``point`` is preserved.

    Args:
        origin: ScreenPoint to rotate about
        point: ScreenPoint to rotate
        deg: Rotation angle in degrees

    Returns:
        Rotated point, same type as ``point``
    """
    r = deg_to_rad(deg)
    s = math.sin(r)
    c = math.cos(r)

    x = point.x - origin.x
    y = point.y - origin.y

    return type(point)(
        x=origin.x + x * c - y * s,
        y=origin.y + x * s + y * c,
    )
