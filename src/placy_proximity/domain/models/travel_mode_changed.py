"""Travel mode changed event."""

from dataclasses import dataclass

from placy_proximity.domain.models.travel_mode import TravelMode


@dataclass(frozen=True)
class TravelModeChanged:
    """Broadcast to every mode-dependent widget when the selection changes."""

    mode: TravelMode
    previous_mode: TravelMode
