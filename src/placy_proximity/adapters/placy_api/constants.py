"""Constants for the Placy REST API adapter.

Endpoints are served by the theme's WordPress REST namespace (placy/v1) and
proxy Entur (bus), Trondheim Bysykkel (bike) and Hyre (car sharing).
"""

from placy_proximity.domain.models.integration_kind import IntegrationKind

# Endpoint paths relative to the REST namespace base URL
ENDPOINT_PATHS: dict[IntegrationKind, str] = {
    IntegrationKind.BUS: "/entur/departures",
    IntegrationKind.BIKE: "/bysykkel/availability",
    IntegrationKind.CAR: "/hyre/availability",
}

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Line labels that identify airport express buses
AIRPORT_LINE_MARKERS = ("FB", "Værnes")

# Count thresholds for availability badges
BIKE_LOW_THRESHOLD = 3
CAR_LOW_THRESHOLD = 2
