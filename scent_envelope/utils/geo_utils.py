"""
Geospatial utilities: flat-earth local projection, bearings and polygon export.

The projection treats a degree of latitude as a constant 111,320 m and
scales longitude by cos(latitude). This holds at search-area scale (a few
kilometers) and is not corrected for geodesic distortion.
"""

import math
from typing import Any, Dict, List, Sequence

from shapely.geometry import Point, Polygon as ShapelyPolygon, mapping

METERS_PER_DEGREE = 111_320.0


def meters_per_degree_lat() -> float:
    return METERS_PER_DEGREE


def meters_per_degree_lon(lat_deg: float) -> float:
    return METERS_PER_DEGREE * math.cos(math.radians(lat_deg))


def move_point(start, bearing_deg: float, distance_m: float):
    """Displace a geographic point along a bearing.

    Args:
        start: GeoPoint to move from
        bearing_deg: Bearing clockwise from north (degrees)
        distance_m: Distance in meters

    Returns:
        New point, same type as ``start``
    """
    br = math.radians(bearing_deg)
    d_north = math.cos(br) * distance_m
    d_east = math.sin(br) * distance_m

    d_lat = d_north / meters_per_degree_lat()
    d_lon = d_east / meters_per_degree_lon(start.lat)

    return type(start)(lat=start.lat + d_lat, lon=start.lon + d_lon)


def normalize_deg(deg: float) -> float:
    """Normalize an angle into [0, 360)."""
    return deg % 360.0


def downwind_deg(from_deg: float) -> float:
    """
    Convert a meteorological "from" bearing into the downwind "to" bearing.
    """
    return (from_deg + 180.0) % 360.0


def zone_polygon(points: Sequence) -> ShapelyPolygon:
    """
    Build a Shapely polygon from an ordered list of GeoPoints.

    Shapely works in (x, y), so vertices are emitted as (lon, lat).
    """
    return ShapelyPolygon([(p.lon, p.lat) for p in points])


def zones_to_features(polygons: Dict[str, List], order: Sequence[str]) -> List[Dict[str, Any]]:
    """
    Convert zone vertex lists into GeoJSON Polygon features.

    Args:
        polygons: Mapping of zone name to ordered GeoPoint list
        order: Zone names in the order features should be emitted

    Returns:
        List of GeoJSON feature dicts with a ``zone`` property
    """
    features = []
    for name in order:
        geom = mapping(zone_polygon(polygons[name]))
        features.append({
            'type': 'Feature',
            'geometry': _plain_geometry(geom),
            'properties': {'zone': name},
        })
    return features


def point_feature(point, **properties) -> Dict[str, Any]:
    """GeoJSON Point feature for a GeoPoint."""
    return {
        'type': 'Feature',
        'geometry': _plain_geometry(mapping(Point(point.lon, point.lat))),
        'properties': dict(properties),
    }


def _plain_geometry(geom: Dict[str, Any]) -> Dict[str, Any]:
    # shapely.mapping emits nested tuples; json round-trips want lists
    def to_lists(value):
        if isinstance(value, (tuple, list)):
            return [to_lists(v) for v in value]
        return value

    return {'type': geom['type'], 'coordinates': to_lists(geom['coordinates'])}
