#!/usr/bin/env python3
"""
Evaluate a scent envelope from the command line.

Usage: plan_envelope.py <lat> <lon> <wind_from_deg> <wind_mph> <elapsed_min> [out.geojson]

Conditions take their planning defaults (75F, 50% RH, partly cloudy, no
precip, mixed terrain, neutral stability).
"""

import sys
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parents[1]
sys.path.insert(0, str(project_root))

from scent_envelope import (
    EnvelopeRequest,
    GeoPoint,
    WindObservation,
    add_minutes,
    compute_scent_envelope,
    wind_summary,
)

USAGE = "Usage: plan_envelope.py <lat> <lon> <wind_from_deg> <wind_mph> <elapsed_min> [out.geojson]"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 5:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        lat, lon, wind_from, wind_mph, elapsed = (float(a) for a in argv[:5])
    except ValueError as e:
        print(f"Invalid argument: {e}\n{USAGE}", file=sys.stderr)
        return 1
    out_path = argv[5] if len(argv) > 5 else None

    logging.basicConfig(level=logging.INFO)

    # Anchor the scenario on the wall clock once, here, not inside the model
    lkp_time = datetime.now(timezone.utc)
    wind = WindObservation.from_mph(wind_mph, wind_from)
    request = EnvelopeRequest(
        lkp=GeoPoint(lat=lat, lon=lon),
        lkp_time=lkp_time,
        eval_time=add_minutes(lkp_time, elapsed),
        wind=wind,
    )
    result = compute_scent_envelope(request)

    print(wind_summary(wind))
    print(f"Minutes since LKP: {result.minutes_since_lkp}")
    print(f"Confidence: {result.confidence_score} ({result.confidence_band.value}), "
          f"reassess in {result.reset_recommendation_minutes} min")
    for sp in result.recommended_start_points:
        print(f"  {sp.label}: {sp.point.lat:.5f}, {sp.point.lon:.5f}")
    for note in result.deployment_notes:
        print(f"  - {note}")

    if out_path:
        with open(out_path, "w") as f:
            json.dump(result.to_geojson(), f, indent=2)
        print(f"✓ Wrote {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
