"""
Envelope growth bands: the same LKP and conditions evaluated at several
elapsed times, for drawing growth rings and a summary table.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .conditions import ConfidenceBand, EnvelopeRequest, GeoPoint
from .envelope_model import EnvelopeModel
from .model_parameters import ModelParameters, get_model_parameters
from .scent_model import compute_scent_envelope


@dataclass(frozen=True)
class EnvelopeBand:
    minutes: int
    polygons: Dict[str, List[GeoPoint]]
    confidence_score: int
    confidence_band: ConfidenceBand


def compute_envelope_bands(request: EnvelopeRequest,
                           minutes: Optional[Iterable[int]] = None,
                           params: Optional[ModelParameters] = None) -> List[EnvelopeBand]:
    """Evaluate the envelope at each elapsed-minute offset from the LKP time.

    Args:
        request: Base request; its evaluation time is ignored
        minutes: Elapsed minutes per band, defaults to ``params.band_minutes``
        params: Model parameters

    Returns:
        Bands sorted by elapsed minutes, duplicates removed
    """
    params = params or get_model_parameters()
    if minutes is None:
        minutes = params.band_minutes

    bands = []
    for mins in sorted(set(int(m) for m in minutes)):
        result = compute_scent_envelope(request.at_minutes(mins), params)
        bands.append(EnvelopeBand(
            minutes=result.minutes_since_lkp,
            polygons=result.polygons,
            confidence_score=result.confidence_score,
            confidence_band=result.confidence_band,
        ))
    return bands


def bands_to_dataframe(bands: List[EnvelopeBand], request: EnvelopeRequest,
                       params: Optional[ModelParameters] = None) -> pd.DataFrame:
    """Summary table with one row per band.

    Columns: minutes, confidence_score, confidence_band and the length of
    each zone in meters (``core_length_m`` etc.).
    """
    model = EnvelopeModel(params or get_model_parameters())
    conditions = request.conditions
    wind_mph = max(0.0, request.wind.speed_mph)

    rows = []
    for band in bands:
        zones = model.zone_dimensions(band.minutes, wind_mph, conditions.terrain, conditions.stability)
        row = {
            'minutes': band.minutes,
            'confidence_score': band.confidence_score,
            'confidence_band': band.confidence_band.value,
        }
        for name, dims in zones.items():
            row[f'{name}_length_m'] = round(dims.length_m, 1)
        rows.append(row)

    return pd.DataFrame(rows)
