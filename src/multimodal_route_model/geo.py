"""Geographic calculations: haversine distance and edge distances from coordinates."""
import math
from typing import Optional

from .config import EARTH_RADIUS_KM


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate great-circle distance between two points."""
    lat1_r = math.radians(lat1)
    lat2_r = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_KM * c


def leg_distance_km(
    origin: str,
    dest: str,
    coordinates: dict[str, tuple[float, float]],
    precision: Optional[int] = 3
) -> float:
    """
    Straight-line distance for a leg between two located nodes.

    Raises ValueError if either endpoint has no coordinates.
    """
    missing = [n for n in (origin, dest) if n not in coordinates]
    if missing:
        raise ValueError(f"No coordinates for location(s): {missing}")

    lat1, lon1 = coordinates[origin]
    lat2, lon2 = coordinates[dest]
    dist = haversine_km(lat1, lon1, lat2, lon2)

    if precision is not None:
        dist = round(dist, precision)
    return dist
