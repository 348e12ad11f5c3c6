"""Station request domain model."""

from dataclasses import dataclass

from placy_proximity.domain.models.integration_kind import IntegrationKind


@dataclass(frozen=True)
class StationRequest:
    """What an accordion row asks the availability fetcher for."""

    station_id: str
    kind: IntegrationKind
    secondary_id: str | None = None  # quay id for bus stops
    transport_mode: str | None = None
    line_filter: str | None = None

    @property
    def key(self) -> tuple[str, str, str, str, str]:
        """Identity used to coalesce concurrent identical requests."""
        return (
            self.kind.value,
            self.station_id,
            self.secondary_id or "",
            self.transport_mode or "",
            self.line_filter or "",
        )
