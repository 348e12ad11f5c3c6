"""Point-of-interest marker domain model."""

from dataclasses import dataclass, field

from placy_proximity.domain.models.coordinate import Coordinate
from placy_proximity.domain.models.travel_mode import TravelMode


@dataclass(frozen=True)
class POIMarker:
    """A point of interest rendered on the page.

    `estimates` holds travel minutes precomputed by the templating layer, keyed by mode.
    """

    id: str
    coordinate: Coordinate
    estimates: dict[TravelMode, int] = field(default_factory=dict)

    def precomputed_minutes(self, mode: TravelMode) -> int | None:
        """Return the precomputed estimate for a mode, if the markup carried one."""
        return self.estimates.get(mode)
