"""Protocols shared between the page widgets and their collaborators."""

from placy_proximity.domain.contracts.availability_cache import AvailabilityCacheProtocol
from placy_proximity.domain.contracts.availability_parser import AvailabilityParserProtocol
from placy_proximity.domain.contracts.departure_time_formatter import (
    DepartureTimeFormatterProtocol,
)
from placy_proximity.domain.contracts.mode_broadcaster import (
    ModeBroadcasterProtocol,
    ModeChangeHandler,
)
from placy_proximity.domain.contracts.travel_time_estimator import TravelTimeEstimatorProtocol

__all__ = [
    "AvailabilityCacheProtocol",
    "AvailabilityParserProtocol",
    "DepartureTimeFormatterProtocol",
    "ModeBroadcasterProtocol",
    "ModeChangeHandler",
    "TravelTimeEstimatorProtocol",
]
