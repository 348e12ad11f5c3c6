"""Travel time estimation from straight-line distance."""

import math

from placy_proximity.application.services.geo_distance import haversine_km
from placy_proximity.domain.models.coordinate import Coordinate
from placy_proximity.domain.models.poi_marker import POIMarker
from placy_proximity.domain.models.travel_mode import MODE_SPEED_KMH, MODE_TEXT, TravelMode


class TravelTimeEstimator:
    """Estimates travel minutes with fixed per-mode speeds.

    Results are rough estimates over the great-circle distance, not routes.
    """

    def __init__(self, speeds_kmh: dict[TravelMode, float] | None = None) -> None:
        """Initialize the estimator.

        Args:
            speeds_kmh: Speed per mode in km/h, defaults to walk 5, bike 15, drive 40.
        """
        self.speeds_kmh = dict(speeds_kmh or MODE_SPEED_KMH)

    def estimate_minutes(self, distance_km: float, mode: TravelMode) -> int:
        """Estimate whole minutes (rounded up) needed to cover a distance."""
        return math.ceil(distance_km / self.speeds_kmh[mode] * 60)

    def estimate_between(self, origin: Coordinate, target: Coordinate, mode: TravelMode) -> int:
        """Estimate minutes from origin to target."""
        return self.estimate_minutes(haversine_km(origin, target), mode)

    def estimate_for_marker(self, origin: Coordinate, marker: POIMarker, mode: TravelMode) -> int:
        """Estimate minutes to a marker, preferring an estimate precomputed in the markup."""
        precomputed = marker.precomputed_minutes(mode)
        if precomputed is not None:
            return precomputed
        return self.estimate_between(origin, marker.coordinate, mode)

    @staticmethod
    def format_badge(minutes: int, mode: TravelMode) -> str:
        """Format the timeline badge text, e.g. '4 min til fots'."""
        return f"{minutes} min {MODE_TEXT[mode]}"
