import logging
from datetime import datetime, timezone

import pytest

from scent_envelope import (
    Cloud,
    EnvelopeInputError,
    EnvelopeRequest,
    EnvironmentalConditions,
    Precip,
    Stability,
    Terrain,
    WindObservation,
    parse_timestamp,
    wind_summary,
)

BASE = {
    "lkp_lat": 27.49,
    "lkp_lon": -82.45,
    "lkp_time_iso": "2025-06-01T14:00:00Z",
    "now_time_iso": "2025-06-01T14:45:00Z",
    "wind_from_deg": 90,
    "wind_speed_mph": 6,
}


def test_parse_accepts_members_and_strings():
    assert Terrain.parse(Terrain.FOREST) is Terrain.FOREST
    assert Terrain.parse(" Open ") is Terrain.OPEN
    assert Stability.parse("CONVECTIVE") is Stability.CONVECTIVE
    assert Cloud.parse("night") is Cloud.NIGHT
    assert Precip.parse("heavy") is Precip.HEAVY


@pytest.mark.parametrize("enum_cls,expected", [
    (Terrain, Terrain.MIXED),
    (Stability, Stability.NEUTRAL),
    (Cloud, Cloud.OTHER),
    (Precip, Precip.NONE),
])
def test_unknown_tags_fall_back_with_warning(enum_cls, expected, caplog):
    with caplog.at_level(logging.WARNING):
        assert enum_cls.parse("volcanic") is expected
    assert "volcanic" in caplog.text


def test_conditions_coerce_strings():
    conditions = EnvironmentalConditions(terrain="urban", stability="stable", cloud="clear", precip="light")
    assert conditions.terrain is Terrain.URBAN
    assert conditions.stability is Stability.STABLE
    assert conditions.cloud is Cloud.CLEAR
    assert conditions.precip is Precip.LIGHT
    assert EnvironmentalConditions(terrain=None).terrain is Terrain.MIXED


def test_wind_observation_units():
    wind = WindObservation.from_mph(10, 270, timezone="America/New_York")
    assert wind.speed_mps == pytest.approx(4.4704, rel=1e-4)
    assert wind.speed_mph == pytest.approx(10)
    assert wind.timezone == "America/New_York"
    assert wind_summary(wind) == "Wind from 270° @ 10.0 mph"


def test_parse_timestamp():
    assert parse_timestamp("2025-06-01T14:00:00Z") == datetime(2025, 6, 1, 14, tzinfo=timezone.utc)
    assert parse_timestamp("2025-06-01T14:00:00") == datetime(2025, 6, 1, 14, tzinfo=timezone.utc)
    with pytest.raises(EnvelopeInputError):
        parse_timestamp("yesterday afternoon")


def test_from_dict_defaults_conditions():
    request = EnvelopeRequest.from_dict(BASE)
    assert request.conditions == EnvironmentalConditions()
    assert request.wind.from_deg == 90
    assert request.wind.speed_mph == pytest.approx(6)


def test_from_dict_parses_string_booleans():
    request = EnvelopeRequest.from_dict({**BASE, "recent_rain": "false"})
    assert request.conditions.recent_rain is False
    request = EnvelopeRequest.from_dict({**BASE, "recent_rain": "yes"})
    assert request.conditions.recent_rain is True


@pytest.mark.parametrize("key", ["lkp_lat", "lkp_time_iso", "now_time_iso", "wind_speed_mph"])
def test_from_dict_missing_field(key):
    data = dict(BASE)
    del data[key]
    with pytest.raises(EnvelopeInputError, match=key):
        EnvelopeRequest.from_dict(data)


def test_from_dict_bad_values():
    with pytest.raises(EnvelopeInputError, match="wind_from_deg"):
        EnvelopeRequest.from_dict({**BASE, "wind_from_deg": "west"})
    with pytest.raises(EnvelopeInputError):
        EnvelopeRequest.from_dict({**BASE, "now_time_iso": "not-a-time"})


def test_input_error_is_value_error():
    assert issubclass(EnvelopeInputError, ValueError)


@pytest.mark.parametrize("from_deg,label", [(359.7, 0), (359.4, 359), (-0.2, 0), (720.6, 1)])
def test_wind_summary_bearing_wraps(from_deg, label):
    assert wind_summary(WindObservation.from_mph(5, from_deg)) == f"Wind from {label}° @ 5.0 mph"
