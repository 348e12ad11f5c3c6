"""Protocol for availability caching."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot
    from placy_proximity.domain.models.integration_kind import IntegrationKind


class AvailabilityCacheProtocol(Protocol):
    """Protocol for caching availability snapshots by station."""

    def get(self, kind: "IntegrationKind", station_id: str) -> "AvailabilitySnapshot | None":
        """Get the cached snapshot for a station.

        Args:
            kind: Integration the station belongs to.
            station_id: The external station ID.

        Returns:
            The cached snapshot, or None if nothing usable is cached.
        """
        ...

    def set(self, snapshot: "AvailabilitySnapshot") -> None:
        """Store a snapshot under its kind and station ID.

        Args:
            snapshot: The snapshot to cache.
        """
        ...

    def clear(self) -> None:
        """Drop every cached snapshot."""
        ...
