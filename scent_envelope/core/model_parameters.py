"""
Model parameters for scent envelope planning.

Holds the tunable constants of the envelope, fan and start-point models
with their documented defaults, and round-trips them through plain dicts
so a UI can persist a planner's overrides.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class ZoneScale:
    """Length and width multipliers applied to the base envelope."""
    length: float
    width: float


DEFAULT_ZONE_SCALES: Dict[str, ZoneScale] = {
    'core': ZoneScale(length=0.55, width=0.45),
    'fringe': ZoneScale(length=0.85, width=0.8),
    'residual': ZoneScale(length=1.0, width=1.15),
}


@dataclass(frozen=True)
class ModelParameters:
    """Container for all model parameters. Instances are immutable; use
    ``dataclasses.replace`` or ``from_dict`` to derive overrides."""

    # Fan polygon: number of equal angular steps across the arc
    arc_points: int = 28

    # Wind speed above which length growth stops increasing (mph)
    wind_cap_mph: float = 18.0

    # Nested zone multipliers, smallest first
    zone_scales: Mapping[str, ZoneScale] = field(default_factory=lambda: dict(DEFAULT_ZONE_SCALES))

    # Start points as fractions of the envelope length along the axis
    start_point_fractions: Tuple[float, float] = (0.35, 0.55)

    # Elapsed minutes for growth bands
    band_minutes: Tuple[int, ...] = (30, 60, 120)

    def __post_init__(self):
        # read-only view so a shared instance cannot be altered in place
        object.__setattr__(self, 'zone_scales', MappingProxyType(dict(self.zone_scales)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to a JSON-friendly dictionary."""
        return {
            'arc_points': self.arc_points,
            'wind_cap_mph': self.wind_cap_mph,
            'zone_scales': {
                name: {'length': s.length, 'width': s.width}
                for name, s in self.zone_scales.items()
            },
            'start_point_fractions': list(self.start_point_fractions),
            'band_minutes': list(self.band_minutes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ModelParameters':
        """Create ModelParameters from a dictionary. Missing keys keep defaults."""
        defaults = cls()
        kwargs: Dict[str, Any] = {}
        if data.get('arc_points') is not None:
            kwargs['arc_points'] = max(1, int(data['arc_points']))
        if data.get('wind_cap_mph') is not None:
            kwargs['wind_cap_mph'] = float(data['wind_cap_mph'])

        if data.get('zone_scales'):
            scales = dict(defaults.zone_scales)
            for name, s in data['zone_scales'].items():
                if name in scales:
                    scales[name] = ZoneScale(length=float(s['length']), width=float(s['width']))
            kwargs['zone_scales'] = scales

        if data.get('start_point_fractions'):
            near, far = data['start_point_fractions']
            kwargs['start_point_fractions'] = (float(near), float(far))
        if data.get('band_minutes'):
            kwargs['band_minutes'] = tuple(int(m) for m in data['band_minutes'])

        return replace(defaults, **kwargs)


# Module default instance
_default_parameters = ModelParameters()


def get_model_parameters() -> ModelParameters:
    """Get the default model parameters."""
    return _default_parameters
