"""
Core functionality for scent envelope planning.

Active Modules:
- conditions: Request/result types and condition enumerations
- envelope_model: Zone length and width from time, wind and conditions
- confidence: Confidence score, band, reset time and deployment notes
- fan_polygon: Geographic fan polygons for each zone
- start_points: Deployment points along the downwind axis
- cone: Screen-space cone overlay geometry
- scent_model: Combined envelope computation
- time_bands: Envelope growth over several elapsed times
"""

from .conditions import (
    Cloud,
    Cone,
    ConfidenceBand,
    EnvelopeInputError,
    EnvelopeRequest,
    EnvelopeResult,
    EnvironmentalConditions,
    GeoPoint,
    Precip,
    ScreenPoint,
    Stability,
    StartPoint,
    Terrain,
    WindObservation,
    add_minutes,
    parse_timestamp,
    wind_summary,
)
from .cone import compute_cone, compute_cone_for_wind, default_half_angle_deg_from_mph, resolve_half_angle
from .confidence import ConfidenceScorer
from .envelope_model import EnvelopeModel
from .fan_polygon import FanPolygonBuilder
from .model_parameters import ModelParameters, get_model_parameters
from .scent_model import compute_scent_envelope, minutes_between
from .start_points import StartPointPlanner
from .time_bands import EnvelopeBand, bands_to_dataframe, compute_envelope_bands

__all__ = [
    "Cloud",
    "Cone",
    "ConfidenceBand",
    "EnvelopeInputError",
    "EnvelopeRequest",
    "EnvelopeResult",
    "EnvironmentalConditions",
    "GeoPoint",
    "Precip",
    "ScreenPoint",
    "Stability",
    "StartPoint",
    "Terrain",
    "WindObservation",
    "add_minutes",
    "parse_timestamp",
    "wind_summary",
    "compute_cone",
    "compute_cone_for_wind",
    "default_half_angle_deg_from_mph",
    "resolve_half_angle",
    "ConfidenceScorer",
    "EnvelopeModel",
    "FanPolygonBuilder",
    "ModelParameters",
    "get_model_parameters",
    "compute_scent_envelope",
    "minutes_between",
    "StartPointPlanner",
    "EnvelopeBand",
    "bands_to_dataframe",
    "compute_envelope_bands",
]
