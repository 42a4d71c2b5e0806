"""
Confidence scoring for a scent envelope.

The score starts from an exponential time decay whose constant (tau)
depends on the weather regime, then is scaled by independent humidity,
temperature, sky, precipitation and wind factors.
"""

from dataclasses import dataclass
from typing import Dict, List
import math

from .conditions import Cloud, ConfidenceBand, EnvironmentalConditions, Precip
from ..utils.trig_utils import clamp

MIN_SCORE = 5
MAX_SCORE = 100

SKY_FACTORS: Dict[Cloud, float] = {
    Cloud.CLEAR: 0.85,
    Cloud.PARTLY: 0.95,
    Cloud.OVERCAST: 1.05,
    Cloud.NIGHT: 1.05,
    Cloud.OTHER: 1.0,
}

PRECIP_FACTORS: Dict[Precip, float] = {
    Precip.NONE: 1.0,
    Precip.LIGHT: 0.9,
    Precip.MODERATE: 0.9,
    Precip.HEAVY: 0.75,
}

RECENT_RAIN_FACTOR = 0.95

RESET_MINUTES: Dict[ConfidenceBand, int] = {
    ConfidenceBand.HIGH: 60,
    ConfidenceBand.MODERATE: 45,
    ConfidenceBand.LOW: 30,
}

LOW_WIND_NOTE = "Low wind: scent pooling/eddy likely. Work LKP and leeward obstacles."
HIGH_WIND_NOTE = "Higher wind: dilution/variability likely. Use multiple start points and reassess often."
HEAVY_PRECIP_NOTE = "Heavy precip can disrupt airborne scent. Prioritize high-probability areas first."

BAND_NOTES: Dict[ConfidenceBand, str] = {
    ConfidenceBand.LOW: "Low confidence: use envelope as planning aid; prioritize tracks/POAs/intel.",
    ConfidenceBand.MODERATE: "Moderate confidence: core first, fringe support, residual if resources permit.",
    ConfidenceBand.HIGH: "High confidence: deploy downwind along core axis, bracket fringe.",
}


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def tau_minutes(temperature_f: float, rel_humidity_pct: float, cloud, wind_mph: float) -> float:
    """Time-decay constant for the weather regime. First matching rule wins."""
    cloud = Cloud.parse(cloud)
    if temperature_f > 85 or rel_humidity_pct < 35 or wind_mph > 15 or cloud is Cloud.CLEAR:
        return 120.0
    if temperature_f < 65 and rel_humidity_pct > 55 and cloud in (Cloud.OVERCAST, Cloud.NIGHT):
        return 240.0
    return 180.0


def humidity_factor(rel_humidity_pct: float) -> float:
    if rel_humidity_pct < 30:
        return 0.8
    if rel_humidity_pct > 60:
        return 1.1
    return 1.0


def temperature_factor(temperature_f: float) -> float:
    if temperature_f > 85:
        return 0.85
    if temperature_f < 60:
        return 1.05
    return 1.0


def sky_factor(cloud) -> float:
    return SKY_FACTORS[Cloud.parse(cloud)]


def precip_factor(precip, recent_rain: bool) -> float:
    factor = PRECIP_FACTORS[Precip.parse(precip)]
    if recent_rain:
        factor *= RECENT_RAIN_FACTOR
    return factor


def wind_factor(wind_mph: float) -> float:
    if wind_mph <= 3:
        return 0.85
    if wind_mph <= 12:
        return 1.0
    if wind_mph <= 18:
        return 0.9
    return 0.8


def confidence_band(score: int) -> ConfidenceBand:
    if score >= 70:
        return ConfidenceBand.HIGH
    if score >= 40:
        return ConfidenceBand.MODERATE
    return ConfidenceBand.LOW


@dataclass(frozen=True)
class ConfidenceAssessment:
    score: int
    band: ConfidenceBand
    reset_recommendation_minutes: int
    notes: List[str]


class ConfidenceScorer:
    """Scores how much a planner should trust an envelope."""

    def score(self, minutes: float, wind_mph: float, conditions: EnvironmentalConditions) -> int:
        """Confidence score in [5, 100] for the elapsed time and conditions."""
        t = max(0.0, minutes)
        w = max(0.0, wind_mph)
        tau = tau_minutes(conditions.temperature_f, conditions.rel_humidity_pct, conditions.cloud, w)
        c_time = 100 * math.exp(-t / tau)

        c = (c_time
             * humidity_factor(conditions.rel_humidity_pct)
             * temperature_factor(conditions.temperature_f)
             * sky_factor(conditions.cloud)
             * precip_factor(conditions.precip, conditions.recent_rain)
             * wind_factor(w))
        return int(clamp(round_half_up(c), MIN_SCORE, MAX_SCORE))

    def deployment_notes(self, wind_mph: float, conditions: EnvironmentalConditions,
                         band: ConfidenceBand) -> List[str]:
        """Guidance notes; every matching condition contributes, band note last."""
        w = max(0.0, wind_mph)
        notes = []
        if w <= 3:
            notes.append(LOW_WIND_NOTE)
        if w >= 13:
            notes.append(HIGH_WIND_NOTE)
        if Precip.parse(conditions.precip) is Precip.HEAVY:
            notes.append(HEAVY_PRECIP_NOTE)
        notes.append(BAND_NOTES[band])
        return notes

    def assess(self, minutes: float, wind_mph: float,
               conditions: EnvironmentalConditions) -> ConfidenceAssessment:
        score = self.score(minutes, wind_mph, conditions)
        band = confidence_band(score)
        return ConfidenceAssessment(
            score=score,
            band=band,
            reset_recommendation_minutes=RESET_MINUTES[band],
            notes=self.deployment_notes(wind_mph, conditions, band),
        )
