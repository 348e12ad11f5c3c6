"""Integration kind domain model."""

from enum import StrEnum


class IntegrationKind(StrEnum):
    """External live-data integration behind a station accordion."""

    BUS = "bus"
    BIKE = "bike"
    CAR = "car"

    @property
    def is_cacheable(self) -> bool:
        """Bike and car availability is fetched once per session; bus departures never cached."""
        return self is not IntegrationKind.BUS
