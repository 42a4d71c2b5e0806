"""
Closed-form scent envelope dimensions.

Length grows linearly with elapsed time plus a wind-driven term that
saturates logarithmically; width grows with time and with the mixing
implied by stability and terrain. All inputs are in imperial planning
units (minutes, mph, feet) and outputs are meters.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import math

from .conditions import Stability, Terrain
from .model_parameters import ModelParameters, get_model_parameters

FEET_TO_METERS = 0.3048


@dataclass(frozen=True)
class StabilityFactors:
    """Stability class adjustments.

    - length: along-wind reach multiplier
    - mix: cross-wind spread multiplier
    """
    length: float
    mix: float


# Every member must appear: lookups are exhaustive, not defaulted
STABILITY_FACTORS: Dict[Stability, StabilityFactors] = {
    Stability.NEUTRAL: StabilityFactors(length=1.0, mix=1.0),
    Stability.STABLE: StabilityFactors(length=0.9, mix=0.85),
    Stability.CONVECTIVE: StabilityFactors(length=1.05, mix=1.25),
}

TERRAIN_LENGTH_MULT: Dict[Terrain, float] = {
    Terrain.MIXED: 1.0,
    Terrain.OPEN: 1.1,
    Terrain.FOREST: 0.95,
    Terrain.URBAN: 0.85,
    Terrain.SWAMP: 0.9,
    Terrain.BEACH: 1.0,
}

TERRAIN_MIX_MULT: Dict[Terrain, float] = {
    Terrain.MIXED: 1.0,
    Terrain.OPEN: 1.0,
    Terrain.FOREST: 1.0,
    Terrain.URBAN: 1.15,
    Terrain.SWAMP: 1.0,
    Terrain.BEACH: 1.0,
}


@dataclass(frozen=True)
class ZoneDimensions:
    """Length and end width of one envelope zone, in meters."""
    length_m: float
    width_m: float


def terrain_length_mult(terrain) -> float:
    return TERRAIN_LENGTH_MULT[Terrain.parse(terrain)]


def stability_mult(stability) -> float:
    return STABILITY_FACTORS[Stability.parse(stability)].length


def mix_mult(stability, terrain) -> float:
    """Cross-wind mixing multiplier; stability and terrain factors compound."""
    return STABILITY_FACTORS[Stability.parse(stability)].mix * TERRAIN_MIX_MULT[Terrain.parse(terrain)]


def envelope_length_m(minutes: float, wind_mph: float, terrain, stability,
                      wind_cap_mph: float = 18.0) -> float:
    """Total along-wind envelope length.

    Args:
        minutes: Elapsed minutes since LKP (negative treated as 0)
        wind_mph: Wind speed (negative treated as 0)
        terrain: Terrain tag
        stability: Stability tag
        wind_cap_mph: Speed above which the wind term stops growing

    Returns:
        Length in meters
    """
    t = max(0.0, minutes)
    w_eff = min(max(0.0, wind_mph), wind_cap_mph)

    base_ft = 30 + 6.0 * t
    wind_ft = 120 * w_eff * math.log(1 + t / 30)
    length_ft = (base_ft + wind_ft) * terrain_length_mult(terrain) * stability_mult(stability)
    return length_ft * FEET_TO_METERS


def envelope_width_m(minutes: float, terrain, stability) -> float:
    """Cross-wind envelope width at the far end, in meters."""
    t = max(0.0, minutes)
    width_ft = (20 + 3.5 * t + 40 * math.sqrt(max(1.0, t))) * mix_mult(stability, terrain)
    return width_ft * FEET_TO_METERS


class EnvelopeModel:
    """Computes nested zone dimensions for a set of conditions."""

    def __init__(self, params: Optional[ModelParameters] = None):
        self.params = params or get_model_parameters()

    def base_dimensions(self, minutes: float, wind_mph: float,
                        terrain, stability) -> ZoneDimensions:
        return ZoneDimensions(
            length_m=envelope_length_m(minutes, wind_mph, terrain, stability,
                                       self.params.wind_cap_mph),
            width_m=envelope_width_m(minutes, terrain, stability),
        )

    def zone_dimensions(self, minutes: float, wind_mph: float,
                        terrain, stability) -> Dict[str, ZoneDimensions]:
        """Scale the base envelope into the core, fringe and residual zones."""
        return self.scale(self.base_dimensions(minutes, wind_mph, terrain, stability))

    def scale(self, base: ZoneDimensions) -> Dict[str, ZoneDimensions]:
        return {
            name: ZoneDimensions(length_m=scale.length * base.length_m,
                                 width_m=scale.width * base.width_m)
            for name, scale in self.params.zone_scales.items()
        }
