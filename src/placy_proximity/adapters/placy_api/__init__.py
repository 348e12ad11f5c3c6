"""Placy REST API adapters."""

from placy_proximity.adapters.placy_api.availability_repository import (
    PlacyAvailabilityRepository,
)
from placy_proximity.adapters.placy_api.http_client import PlacyHttpClient
from placy_proximity.adapters.placy_api.parsers import (
    BikeAvailabilityParser,
    BusDepartureParser,
    CarAvailabilityParser,
    default_parsers,
)

__all__ = [
    "BikeAvailabilityParser",
    "BusDepartureParser",
    "CarAvailabilityParser",
    "PlacyAvailabilityRepository",
    "PlacyHttpClient",
    "default_parsers",
]
