"""Availability repository port."""

from typing import Any, Protocol

from placy_proximity.domain.models.station_request import StationRequest


class AvailabilityRepository(Protocol):
    """Port for retrieving live availability payloads from the Placy REST API."""

    async def get_availability(self, request: StationRequest) -> Any:
        """Fetch the `data` member of a successful response for one station.

        Raises:
            NetworkError: On transport failure or non-2xx status.
            MalformedResponseError: If the envelope reports `success: false`.
        """
        ...
