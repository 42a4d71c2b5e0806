from datetime import datetime, timezone

import pytest

from scent_envelope import (
    EnvelopeRequest,
    EnvironmentalConditions,
    GeoPoint,
    WindObservation,
    add_minutes,
)

T0 = datetime(2025, 6, 1, 14, 0, tzinfo=timezone.utc)
LKP = GeoPoint(lat=27.49, lon=-82.45)


def make_request(minutes=60, wind_mph=10.0, wind_from=270.0, **conditions):
    return EnvelopeRequest(
        lkp=LKP,
        lkp_time=T0,
        eval_time=add_minutes(T0, minutes),
        wind=WindObservation.from_mph(wind_mph, wind_from),
        conditions=EnvironmentalConditions(**conditions),
    )


@pytest.fixture
def scenario_request():
    """LKP (27.49, -82.45), 60 min elapsed, 10 mph from 270, mild conditions."""
    return make_request(
        minutes=60, wind_mph=10.0, wind_from=270.0,
        temperature_f=75, rel_humidity_pct=50, cloud="partly", precip="none",
        recent_rain=False, terrain="mixed", stability="neutral",
    )
