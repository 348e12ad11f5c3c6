"""Page widgets."""

from placy_proximity.adapters.page.widgets.accordion_controller import AccordionController
from placy_proximity.adapters.page.widgets.proximity_timeline import (
    ProximityTimeline,
    TimelineCard,
)
from placy_proximity.adapters.page.widgets.travel_mode_selector import TravelModeSelector

__all__ = ["AccordionController", "ProximityTimeline", "TimelineCard", "TravelModeSelector"]
