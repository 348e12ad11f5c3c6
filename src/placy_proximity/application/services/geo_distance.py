"""Great-circle distance between two coordinates."""

import math

from placy_proximity.domain.models.coordinate import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Return the great-circle distance between two coordinates in kilometers.

    Non-finite inputs propagate as NaN; callers validate coordinates first.
    """
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    h = math.sin(d_lat / 2) ** 2 + math.cos(math.radians(a.latitude)) * math.cos(
        math.radians(b.latitude)
    ) * math.sin(d_lon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c
