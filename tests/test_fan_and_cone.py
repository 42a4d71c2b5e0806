import math

import pytest

from scent_envelope import (
    FanPolygonBuilder,
    GeoPoint,
    ModelParameters,
    ScreenPoint,
    StartPointPlanner,
    WindObservation,
    compute_cone,
    compute_cone_for_wind,
    default_half_angle_deg_from_mph,
    resolve_half_angle,
)
from scent_envelope.utils import meters_per_degree_lat, meters_per_degree_lon

LKP = GeoPoint(lat=27.49, lon=-82.45)


def local_xy(point, origin=LKP):
    """East/north meters from origin under the flat-earth projection."""
    return ((point.lon - origin.lon) * meters_per_degree_lon(origin.lat),
            (point.lat - origin.lat) * meters_per_degree_lat())


def test_fan_is_closed_at_lkp():
    poly = FanPolygonBuilder().build(LKP, 90, 500, 150)
    assert poly[0] == LKP
    assert poly[-1] == LKP
    assert len(poly) == 28 + 3


def test_fan_arc_points_are_configurable():
    assert len(FanPolygonBuilder(arc_points=10).build(LKP, 0, 100, 40)) == 13
    assert len(FanPolygonBuilder(params=ModelParameters(arc_points=4)).build(LKP, 0, 100, 40)) == 7


def test_fan_arc_geometry():
    builder = FanPolygonBuilder()
    length, width = 500.0, 150.0
    poly = builder.build(LKP, 45, length, width)
    half_angle = math.degrees(math.atan2(width, length))

    bearings = []
    for p in poly[1:-1]:
        east, north = local_xy(p)
        assert math.hypot(east, north) == pytest.approx(length, rel=1e-9)
        bearings.append(math.degrees(math.atan2(east, north)))

    assert bearings == sorted(bearings)
    assert bearings[0] == pytest.approx(45 - half_angle)
    assert bearings[-1] == pytest.approx(45 + half_angle)
    steps = [b - a for a, b in zip(bearings, bearings[1:])]
    assert steps == pytest.approx([steps[0]] * len(steps))


def test_start_points_order_and_spacing():
    points = StartPointPlanner().plan(LKP, 90, 1000)
    assert [sp.label for sp in points] == ["Immediate", "Core Midline", "Core Far"]
    assert points[0].point == LKP

    mid_east, mid_north = local_xy(points[1].point)
    far_east, far_north = local_xy(points[2].point)
    assert mid_east == pytest.approx(350)
    assert far_east == pytest.approx(550)
    assert mid_north == pytest.approx(0, abs=1e-6)
    assert far_north == pytest.approx(0, abs=1e-6)


@pytest.mark.parametrize("mph,expected", [
    (0, 28), (2, 28), (3, 28), (5, 22), (8, 22), (10, 18), (14, 18), (14.5, 14), (20, 14),
])
def test_default_half_angle(mph, expected):
    assert default_half_angle_deg_from_mph(mph) == expected


def test_resolve_half_angle():
    assert resolve_half_angle("auto", 5) == 22
    assert resolve_half_angle("AUTO", 20) == 14
    assert resolve_half_angle(31.5, 5) == 31.5


def test_cone_without_rotation():
    src = ScreenPoint(100, 200)
    cone = compute_cone(src, 300, 20, wind_from_deg=180)

    assert cone.downwind_deg == 0
    assert cone.tip.x == pytest.approx(400)
    assert cone.tip.y == pytest.approx(200)
    dx = 300 * math.cos(math.radians(20))
    dy = 300 * math.sin(math.radians(20))
    assert (cone.left.x, cone.left.y) == pytest.approx((100 + dx, 200 - dy))
    assert (cone.right.x, cone.right.y) == pytest.approx((100 + dx, 200 + dy))


@pytest.mark.parametrize("wind_from", [0, 45, 90, 200, 270, 359.5])
def test_cone_points_lie_at_length(wind_from):
    src = ScreenPoint(50, 60)
    cone = compute_cone(src, 120, 18, wind_from)
    for p in (cone.left, cone.right, cone.tip):
        assert math.hypot(p.x - src.x, p.y - src.y) == pytest.approx(120)
    assert 0 <= cone.downwind_deg < 360
    assert cone.downwind_deg == (wind_from + 180) % 360

    # left and right are symmetric about the tip
    chord = math.hypot(cone.left.x - cone.right.x, cone.left.y - cone.right.y)
    assert chord == pytest.approx(2 * 120 * math.sin(math.radians(18)))


def test_cone_rotates_by_negative_downwind():
    cone = compute_cone(ScreenPoint(0, 0), 100, 10, wind_from_deg=270)
    assert cone.downwind_deg == 90
    assert cone.tip.x == pytest.approx(0, abs=1e-9)
    assert cone.tip.y == pytest.approx(-100)


def test_cone_for_wind_resolves_auto():
    wind = WindObservation.from_mph(10, 180)
    auto = compute_cone_for_wind(ScreenPoint(0, 0), 100, "auto", wind)
    explicit = compute_cone(ScreenPoint(0, 0), 100, 18, 180)
    assert auto == explicit
