"""Parsers turning Placy REST payloads into availability snapshots."""

import logging
from datetime import datetime
from typing import Any

from placy_proximity.adapters.placy_api.constants import AIRPORT_LINE_MARKERS
from placy_proximity.domain.contracts.availability_parser import AvailabilityParserProtocol
from placy_proximity.domain.errors import MalformedResponseError
from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot
from placy_proximity.domain.models.bus_departure import BusDeparture
from placy_proximity.domain.models.integration_kind import IntegrationKind
from placy_proximity.domain.models.station_request import StationRequest

logger = logging.getLogger(__name__)


def _parse_count(data: dict[str, Any], field: str, *, required: bool) -> int:
    """Read a non-negative integer count from the data object."""
    value = data.get(field)
    if value is None:
        if required:
            raise MalformedResponseError(f"Missing '{field}' in availability data")
        return 0
    if isinstance(value, bool):
        raise MalformedResponseError(f"'{field}' must be an integer, got {value!r}")
    try:
        count = int(value)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"'{field}' must be an integer, got {value!r}") from e
    return max(count, 0)


class BusDepartureParser(AvailabilityParserProtocol):
    """Parses Entur departure lists."""

    def __init__(self, max_departures: int = 5) -> None:
        """Initialize the parser.

        Args:
            max_departures: Maximum number of departures to keep.
        """
        self.max_departures = max_departures

    def parse(
        self, request: StationRequest, data: Any, fetched_at: datetime
    ) -> AvailabilitySnapshot:
        """Parse up to `max_departures` departures, in feed order."""
        if data is None:
            data = []
        if not isinstance(data, list):
            raise MalformedResponseError("Departure data must be a list")

        departures = []
        for dep in data[: self.max_departures]:
            if not isinstance(dep, dict):
                logger.warning(f"Skipping malformed departure entry: {dep!r}")
                continue
            departures.append(self._parse_departure(dep))

        return AvailabilitySnapshot(
            station_id=request.station_id,
            kind=IntegrationKind.BUS,
            counts={"departures": len(departures)},
            fetched_at=fetched_at,
            departures=tuple(departures),
        )

    @staticmethod
    def _parse_departure(dep: dict[str, Any]) -> BusDeparture:
        """Parse a single departure entry."""
        line = str(dep.get("line") or "")
        time_str = dep.get("expected_departure") or dep.get("aimed_departure")
        return BusDeparture(
            line=line,
            destination=str(dep.get("destination") or ""),
            departure_time=BusDepartureParser._parse_time(time_str),
            is_airport=any(marker in line for marker in AIRPORT_LINE_MARKERS),
        )

    @staticmethod
    def _parse_time(time_str: Any) -> datetime | None:
        """Parse ISO 8601 time string."""
        if not time_str or not isinstance(time_str, str):
            return None

        try:
            return datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except ValueError:
            logger.warning(f"Unparseable departure time: {time_str!r}")
            return None


class BikeAvailabilityParser(AvailabilityParserProtocol):
    """Parses bike-share station status."""

    def parse(
        self, request: StationRequest, data: Any, fetched_at: datetime
    ) -> AvailabilitySnapshot:
        """Parse available bikes and free docks."""
        if not isinstance(data, dict):
            raise MalformedResponseError("Bike availability data must be an object")

        return AvailabilitySnapshot(
            station_id=request.station_id,
            kind=IntegrationKind.BIKE,
            counts={
                "bikes": _parse_count(data, "num_bikes_available", required=True),
                "docks": _parse_count(data, "num_docks_available", required=True),
            },
            fetched_at=fetched_at,
        )


class CarAvailabilityParser(AvailabilityParserProtocol):
    """Parses car-share station status."""

    def parse(
        self, request: StationRequest, data: Any, fetched_at: datetime
    ) -> AvailabilitySnapshot:
        """Parse available vehicles; a missing count means none available."""
        if not isinstance(data, dict):
            raise MalformedResponseError("Car availability data must be an object")

        return AvailabilitySnapshot(
            station_id=request.station_id,
            kind=IntegrationKind.CAR,
            counts={"vehicles": _parse_count(data, "num_vehicles_available", required=False)},
            fetched_at=fetched_at,
        )


def default_parsers(
    bus_max_departures: int = 5,
) -> dict[IntegrationKind, AvailabilityParserProtocol]:
    """Return the parser for each integration kind."""
    return {
        IntegrationKind.BUS: BusDepartureParser(max_departures=bus_max_departures),
        IntegrationKind.BIKE: BikeAvailabilityParser(),
        IntegrationKind.CAR: CarAvailabilityParser(),
    }
