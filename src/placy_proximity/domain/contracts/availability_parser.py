"""Protocol for parsing availability payloads."""

from datetime import datetime
from typing import Any, Protocol

from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot
from placy_proximity.domain.models.station_request import StationRequest


class AvailabilityParserProtocol(Protocol):
    """Turns the `data` member of a successful response into a snapshot."""

    def parse(
        self, request: StationRequest, data: Any, fetched_at: datetime
    ) -> AvailabilitySnapshot:
        """Parse response data for one station.

        Args:
            request: The request the data answers.
            data: The `data` member of the response envelope.
            fetched_at: When the response was received.

        Returns:
            Normalized availability snapshot.

        Raises:
            MalformedResponseError: If the data does not have the expected shape.
        """
        ...
