"""
Great-circle distance between coordinate pairs.
"""

import math
from collections.abc import Mapping
from typing import Any, Union

from talentmatch.data.models import Coordinates
from talentmatch.utils.constants import EARTH_RADIUS_MILES, KM_PER_MILE

Point = Union[Coordinates, Mapping[str, float], tuple[float, float]]


def _lat_lng(point: Any) -> tuple[float, float]:
    if isinstance(point, Coordinates):
        return point.lat, point.lng
    if isinstance(point, Mapping):
        return float(point["lat"]), float(point["lng"])
    lat, lng = point
    return float(lat), float(lng)


def haversine_distance(p1: Point, p2: Point) -> float:
    """
    Calculate the distance between two points using the Haversine formula.

    Args:
        p1: First point (lat, lng in degrees)
        p2: Second point (lat, lng in degrees)

    Returns:
        Distance in statute miles
    """
    lat1, lng1 = _lat_lng(p1)
    lat2, lng2 = _lat_lng(p2)

    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lng = math.radians(lng2 - lng1)

    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) *
         math.sin(delta_lng / 2) ** 2)
    # Rounding can push a just outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_MILES * c


def miles_to_km(miles: float) -> float:
    """Convert statute miles to kilometers."""
    return miles * KM_PER_MILE
