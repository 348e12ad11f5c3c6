"""Domain models for Placy proximity and live availability."""

from placy_proximity.domain.models.accordion_state import AccordionState
from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot
from placy_proximity.domain.models.bus_departure import BusDeparture
from placy_proximity.domain.models.coordinate import Coordinate
from placy_proximity.domain.models.error_details import ErrorDetails, ErrorKind
from placy_proximity.domain.models.formatted_departure_time import FormattedDepartureTime
from placy_proximity.domain.models.integration_kind import IntegrationKind
from placy_proximity.domain.models.poi_marker import POIMarker
from placy_proximity.domain.models.station_request import StationRequest
from placy_proximity.domain.models.travel_mode import (
    MODE_ICON,
    MODE_LABEL,
    MODE_SPEED_KMH,
    MODE_TEXT,
    TravelMode,
)
from placy_proximity.domain.models.travel_mode_changed import TravelModeChanged

__all__ = [
    "MODE_ICON",
    "MODE_LABEL",
    "MODE_SPEED_KMH",
    "MODE_TEXT",
    "AccordionState",
    "AvailabilitySnapshot",
    "BusDeparture",
    "Coordinate",
    "ErrorDetails",
    "ErrorKind",
    "FormattedDepartureTime",
    "IntegrationKind",
    "POIMarker",
    "StationRequest",
    "TravelMode",
    "TravelModeChanged",
]
