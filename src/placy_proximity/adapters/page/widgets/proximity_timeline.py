"""Proximity timeline widget showing travel time badges on POI cards."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from placy_proximity.adapters.page.dataset import marker_from_dataset
from placy_proximity.domain.models.travel_mode import MODE_ICON

if TYPE_CHECKING:
    from collections.abc import Callable

    from placy_proximity.domain.contracts.mode_broadcaster import ModeBroadcasterProtocol
    from placy_proximity.domain.contracts.travel_time_estimator import (
        TravelTimeEstimatorProtocol,
    )
    from placy_proximity.domain.models.coordinate import Coordinate
    from placy_proximity.domain.models.poi_marker import POIMarker
    from placy_proximity.domain.models.travel_mode import TravelMode
    from placy_proximity.domain.models.travel_mode_changed import TravelModeChanged

logger = logging.getLogger(__name__)


@dataclass
class TimelineCard:
    """A timeline card and its travel time badge."""

    marker: POIMarker | None
    minutes: int | None = None
    badge_text: str | None = None
    icon: str | None = None
    badge_visible: bool = False


class ProximityTimeline:
    """Keeps the travel time badges of its cards in sync with the page's travel mode."""

    def __init__(
        self,
        bus: ModeBroadcasterProtocol,
        estimator: TravelTimeEstimatorProtocol,
        origin: Coordinate | None,
        cards: list[TimelineCard],
    ) -> None:
        """Initialize the timeline.

        Args:
            bus: The page's mode broadcaster.
            estimator: Travel time estimator.
            origin: Property coordinate; None leaves badges hidden.
            cards: Cards of this timeline.
        """
        self.bus = bus
        self.estimator = estimator
        self.origin = origin
        self.cards = cards
        self._unsubscribe: Callable[[], None] | None = None

    @classmethod
    def from_datasets(
        cls,
        bus: ModeBroadcasterProtocol,
        estimator: TravelTimeEstimatorProtocol,
        origin: Coordinate | None,
        datasets: Iterable[Mapping[str, str]],
    ) -> ProximityTimeline:
        """Build a timeline from the `data-*` attributes of its cards."""
        cards = [
            TimelineCard(marker=marker_from_dataset(dataset, fallback_id=str(index)))
            for index, dataset in enumerate(datasets)
        ]
        return cls(bus, estimator, origin, cards)

    def attach(self) -> None:
        """Subscribe to mode changes and render badges for the current mode."""
        if self._unsubscribe is None:
            self._unsubscribe = self.bus.subscribe(self._on_mode_changed)
        self.refresh(self.bus.current_mode)

    def detach(self) -> None:
        """Stop following mode changes."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_mode_changed(self, event: TravelModeChanged) -> None:
        self.refresh(event.mode)

    def refresh(self, mode: TravelMode) -> None:
        """Recompute every card's badge for a mode."""
        if self.origin is None:
            logger.warning("Cannot update cards - no project coordinates")
            return

        updated = 0
        for card in self.cards:
            if card.marker is None:
                continue
            card.minutes = self.estimator.estimate_for_marker(self.origin, card.marker, mode)
            card.badge_text = self.estimator.format_badge(card.minutes, mode)
            card.icon = MODE_ICON[mode]
            card.badge_visible = True
            updated += 1
        logger.debug(f"Updated {updated} timeline card(s) to mode: {mode.value}")
