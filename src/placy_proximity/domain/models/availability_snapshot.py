"""Availability snapshot domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from placy_proximity.domain.models.bus_departure import BusDeparture
from placy_proximity.domain.models.integration_kind import IntegrationKind


@dataclass(frozen=True)
class AvailabilitySnapshot:
    """Live status of one station at the time it was fetched."""

    station_id: str
    kind: IntegrationKind
    counts: dict[str, int]
    fetched_at: datetime
    departures: tuple[BusDeparture, ...] = field(default_factory=tuple)

    def count(self, resource: str) -> int:
        """Return the available count for a resource, 0 if the feed did not report it."""
        return self.counts.get(resource, 0)
