"""Domain layer - core models, contracts and ports."""

from placy_proximity.domain.models import (
    AvailabilitySnapshot,
    Coordinate,
    IntegrationKind,
    POIMarker,
    StationRequest,
    TravelMode,
)
from placy_proximity.domain.ports import AvailabilityRepository

__all__ = [
    "AvailabilityRepository",
    "AvailabilitySnapshot",
    "Coordinate",
    "IntegrationKind",
    "POIMarker",
    "StationRequest",
    "TravelMode",
]
