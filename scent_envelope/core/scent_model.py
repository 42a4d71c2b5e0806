"""
Scent envelope computation for K9 search planning.

Combines the envelope dimensions, fan polygons, confidence assessment
and start points into a single result. The computation is a pure
function of the request: the evaluation time is never read from a clock.
"""

from datetime import datetime
from typing import Optional
import logging
import math

from .conditions import EnvelopeRequest, EnvelopeResult, as_utc
from .confidence import ConfidenceScorer
from .envelope_model import EnvelopeModel
from .fan_polygon import FanPolygonBuilder
from .model_parameters import ModelParameters, get_model_parameters
from .start_points import StartPointPlanner
from ..utils.geo_utils import downwind_deg

logger = logging.getLogger(__name__)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, rounded half up and clamped at 0."""
    seconds = (as_utc(end) - as_utc(start)).total_seconds()
    return max(0, int(math.floor(seconds / 60.0 + 0.5)))


def compute_scent_envelope(request: EnvelopeRequest,
                           params: Optional[ModelParameters] = None) -> EnvelopeResult:
    """Estimate where scent from the LKP has likely traveled.

    Args:
        request: LKP, timestamps, wind and environmental conditions
        params: Model parameters, defaults when omitted

    Returns:
        EnvelopeResult with zone polygons, confidence and deployment guidance
    """
    params = params or get_model_parameters()
    conditions = request.conditions

    t_min = minutes_between(request.lkp_time, request.eval_time)
    wind_mph = max(0.0, request.wind.speed_mph)
    axis = downwind_deg(request.wind.from_deg)

    model = EnvelopeModel(params)
    base = model.base_dimensions(t_min, wind_mph, conditions.terrain, conditions.stability)
    zones = model.scale(base)
    builder = FanPolygonBuilder(params=params)
    polygons = {
        name: builder.build(request.lkp, axis, dims.length_m, dims.width_m)
        for name, dims in zones.items()
    }

    assessment = ConfidenceScorer().assess(t_min, wind_mph, conditions)

    start_points = StartPointPlanner(params).plan(request.lkp, axis, base.length_m)

    logger.debug(
        f"Envelope t={t_min}min axis={axis:.1f}deg wind={wind_mph:.1f}mph "
        f"score={assessment.score} ({assessment.band.value})"
    )

    return EnvelopeResult(
        minutes_since_lkp=t_min,
        polygons=polygons,
        confidence_score=assessment.score,
        confidence_band=assessment.band,
        reset_recommendation_minutes=assessment.reset_recommendation_minutes,
        recommended_start_points=start_points,
        deployment_notes=assessment.notes,
    )
