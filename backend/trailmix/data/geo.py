"""
Haversine distance for geographic nearby queries.
"""
import math
from typing import NamedTuple

# Earth mean radius in miles
EARTH_RADIUS_MILES = 3958.8


class GeoPoint(NamedTuple):
    lat: float
    lng: float


def haversine_distance_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Return great-circle distance between two points in miles (unrounded).
    Arguments in degrees.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlng / 2) ** 2
    # Near-antipodal pairs can round a just past 1
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def round_tenths(value: float) -> float:
    """Round half away from zero to one decimal place. NaN is returned as-is."""
    if math.isnan(value):
        return value
    return math.copysign(math.floor(abs(value) * 10 + 0.5) / 10, value)


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Distance in miles between two points, rounded to one decimal."""
    return round_tenths(haversine_distance_miles(a.lat, a.lng, b.lat, b.lng))
