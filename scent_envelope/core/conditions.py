"""
Input and output types for scent envelope planning.

Categorical conditions are closed enumerations. Each one parses loosely
from user-facing strings and falls back to its neutral member when the
tag is not recognized, so a bad dropdown value degrades the estimate
instead of aborting a planning session.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
import logging

from dateutil import parser as dtp

from ..utils.geo_utils import normalize_deg, point_feature, zones_to_features
from ..utils.trig_utils import mph_to_mps, mps_to_mph

logger = logging.getLogger(__name__)


class EnvelopeInputError(ValueError):
    """Raised when raw request data is missing fields or malformed."""


class _Category(str, Enum):
    """Base for string-valued condition tags with a neutral fallback."""

    @classmethod
    def default(cls):
        raise NotImplementedError

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        tag = str(value or '').strip().lower()
        for member in cls:
            if member.value == tag:
                return member
        fallback = cls.default()
        logger.warning(f"Unknown {cls.__name__.lower()} '{value}', using '{fallback.value}'")
        return fallback


class Terrain(_Category):
    MIXED = 'mixed'
    OPEN = 'open'
    FOREST = 'forest'
    URBAN = 'urban'
    SWAMP = 'swamp'
    BEACH = 'beach'

    @classmethod
    def default(cls):
        return cls.MIXED


class Stability(_Category):
    NEUTRAL = 'neutral'
    STABLE = 'stable'
    CONVECTIVE = 'convective'

    @classmethod
    def default(cls):
        return cls.NEUTRAL


class Cloud(_Category):
    CLEAR = 'clear'
    PARTLY = 'partly'
    OVERCAST = 'overcast'
    NIGHT = 'night'
    # unrecognized sky description: neutral sky factor
    OTHER = 'other'

    @classmethod
    def default(cls):
        return cls.OTHER


class Precip(_Category):
    NONE = 'none'
    LIGHT = 'light'
    MODERATE = 'moderate'
    HEAVY = 'heavy'

    @classmethod
    def default(cls):
        return cls.NONE


class ConfidenceBand(str, Enum):
    HIGH = 'High'
    MODERATE = 'Moderate'
    LOW = 'Low'


@dataclass(frozen=True)
class GeoPoint:
    """Geographic coordinate in degrees."""
    lat: float
    lon: float


@dataclass(frozen=True)
class ScreenPoint:
    """Pixel coordinate in a rendering surface's local space."""
    x: float
    y: float


@dataclass(frozen=True)
class WindObservation:
    """Wind reading from a weather source or manual entry.

    Attributes:
        speed_mps: Wind speed in meters per second
        from_deg: Meteorological direction the wind blows FROM (degrees)
        observed_at: Time of the observation, if known
        timezone: IANA timezone name reported by the source
        utc_offset_seconds: UTC offset reported by the source
    """
    speed_mps: float
    from_deg: float
    observed_at: Optional[datetime] = None
    timezone: Optional[str] = None
    utc_offset_seconds: Optional[int] = None

    @classmethod
    def from_mph(cls, speed_mph: float, from_deg: float, **metadata) -> 'WindObservation':
        return cls(speed_mps=mph_to_mps(speed_mph), from_deg=from_deg, **metadata)

    @property
    def speed_mph(self) -> float:
        return mps_to_mph(self.speed_mps)


def wind_summary(wind: WindObservation) -> str:
    """Overlay label such as ``Wind from 270° @ 10.0 mph``."""
    return f"Wind from {round(normalize_deg(wind.from_deg)) % 360}° @ {wind.speed_mph:.1f} mph"


@dataclass(frozen=True)
class EnvironmentalConditions:
    """Weather and terrain conditions at the search area."""
    temperature_f: float = 75.0
    rel_humidity_pct: float = 50.0
    cloud: Cloud = Cloud.PARTLY
    precip: Precip = Precip.NONE
    recent_rain: bool = False
    terrain: Terrain = Terrain.MIXED
    stability: Stability = Stability.NEUTRAL

    def __post_init__(self):
        # accept plain strings from callers
        object.__setattr__(self, 'cloud', Cloud.parse(self.cloud))
        object.__setattr__(self, 'precip', Precip.parse(self.precip))
        object.__setattr__(self, 'terrain', Terrain.parse(self.terrain))
        object.__setattr__(self, 'stability', Stability.parse(self.stability))


def parse_timestamp(text) -> datetime:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC.

    Raises:
        EnvelopeInputError: If the value is not a valid timestamp
    """
    if isinstance(text, datetime):
        return as_utc(text)
    try:
        return as_utc(dtp.isoparse(str(text)))
    except (ValueError, OverflowError) as e:
        raise EnvelopeInputError(f"Invalid timestamp '{text}': {e}")


def _to_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "y", "on"}
    return bool(value)


def as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def add_minutes(ts: datetime, minutes: float) -> datetime:
    return ts + timedelta(minutes=minutes)


@dataclass(frozen=True)
class EnvelopeRequest:
    """Everything needed to evaluate one scent envelope.

    The evaluation time is always supplied by the caller so that the
    computation stays reproducible.
    """
    lkp: GeoPoint
    lkp_time: datetime
    eval_time: datetime
    wind: WindObservation
    conditions: EnvironmentalConditions = field(default_factory=EnvironmentalConditions)

    def at_minutes(self, minutes: float) -> 'EnvelopeRequest':
        """Copy of this request evaluated ``minutes`` after the LKP time."""
        return EnvelopeRequest(
            lkp=self.lkp,
            lkp_time=self.lkp_time,
            eval_time=add_minutes(self.lkp_time, minutes),
            wind=self.wind,
            conditions=self.conditions,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EnvelopeRequest':
        """Build a request from the flat form/API payload.

        Required keys: lkp_lat, lkp_lon, lkp_time_iso, now_time_iso,
        wind_from_deg, wind_speed_mph. Condition keys are optional and take
        their defaults when absent.

        Raises:
            EnvelopeInputError: On a missing key or a non-numeric value
        """
        defaults = EnvironmentalConditions()

        def number(key, default=None):
            if key not in data or data[key] is None:
                if default is None:
                    raise EnvelopeInputError(f"Missing required field '{key}'")
                return default
            try:
                return float(data[key])
            except (TypeError, ValueError):
                raise EnvelopeInputError(f"Field '{key}' must be numeric, got {data[key]!r}")

        for key in ('lkp_time_iso', 'now_time_iso'):
            if not data.get(key):
                raise EnvelopeInputError(f"Missing required field '{key}'")

        conditions = EnvironmentalConditions(
            temperature_f=number('temperature_f', defaults.temperature_f),
            rel_humidity_pct=number('rel_humidity_pct', defaults.rel_humidity_pct),
            cloud=data.get('cloud', defaults.cloud),
            precip=data.get('precip', defaults.precip),
            recent_rain=_to_bool(data.get('recent_rain', defaults.recent_rain)),
            terrain=data.get('terrain', defaults.terrain),
            stability=data.get('stability', defaults.stability),
        )

        return cls(
            lkp=GeoPoint(lat=number('lkp_lat'), lon=number('lkp_lon')),
            lkp_time=parse_timestamp(data['lkp_time_iso']),
            eval_time=parse_timestamp(data['now_time_iso']),
            wind=WindObservation.from_mph(number('wind_speed_mph'), number('wind_from_deg')),
            conditions=conditions,
        )


@dataclass(frozen=True)
class StartPoint:
    label: str
    point: GeoPoint


ZONE_NAMES = ('core', 'fringe', 'residual')


@dataclass(frozen=True)
class EnvelopeResult:
    """Scent envelope polygons, confidence and deployment guidance.

    Attributes:
        minutes_since_lkp: Whole minutes from LKP time to evaluation (>= 0)
        polygons: Zone name -> closed vertex list starting and ending at the LKP
        confidence_score: Integer score in [5, 100]
        confidence_band: Tier derived from the score
        reset_recommendation_minutes: Minutes until re-assessment is advised
        recommended_start_points: Deployment points, nearest first
        deployment_notes: Ordered guidance strings
    """
    minutes_since_lkp: int
    polygons: Dict[str, List[GeoPoint]]
    confidence_score: int
    confidence_band: ConfidenceBand
    reset_recommendation_minutes: int
    recommended_start_points: List[StartPoint]
    deployment_notes: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'minutes_since_lkp': self.minutes_since_lkp,
            'polygons': {
                name: [{'lat': p.lat, 'lon': p.lon} for p in self.polygons[name]]
                for name in ZONE_NAMES
            },
            'confidence_score': self.confidence_score,
            'confidence_band': self.confidence_band.value,
            'reset_recommendation_minutes': self.reset_recommendation_minutes,
            'recommended_start_points': [
                {'label': sp.label, 'point': {'lat': sp.point.lat, 'lon': sp.point.lon}}
                for sp in self.recommended_start_points
            ],
            'deployment_notes': list(self.deployment_notes),
        }

    def to_geojson(self) -> Dict[str, Any]:
        """FeatureCollection of zone polygons (largest first) and start points."""
        features = zones_to_features(self.polygons, tuple(reversed(ZONE_NAMES)))
        for sp in self.recommended_start_points:
            features.append(point_feature(sp.point, label=sp.label))
        return {'type': 'FeatureCollection', 'features': features}


@dataclass(frozen=True)
class Cone:
    """Screen-space directional cone overlay."""
    left: ScreenPoint
    right: ScreenPoint
    tip: ScreenPoint
    downwind_deg: float
