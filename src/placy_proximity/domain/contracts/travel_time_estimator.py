"""Protocol for estimating travel times."""

from typing import Protocol

from placy_proximity.domain.models.coordinate import Coordinate
from placy_proximity.domain.models.poi_marker import POIMarker
from placy_proximity.domain.models.travel_mode import TravelMode


class TravelTimeEstimatorProtocol(Protocol):
    """Protocol for converting positions and a mode into travel minutes."""

    def estimate_minutes(self, distance_km: float, mode: TravelMode) -> int:
        """Estimate minutes needed to cover a distance."""
        ...

    def estimate_between(self, origin: Coordinate, target: Coordinate, mode: TravelMode) -> int:
        """Estimate minutes from origin to target along the great circle."""
        ...

    def estimate_for_marker(self, origin: Coordinate, marker: POIMarker, mode: TravelMode) -> int:
        """Estimate minutes to a marker, preferring a precomputed estimate."""
        ...

    def format_badge(self, minutes: int, mode: TravelMode) -> str:
        """Format the badge text shown on a timeline card."""
        ...
