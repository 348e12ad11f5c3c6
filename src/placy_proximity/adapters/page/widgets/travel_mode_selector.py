"""Travel mode selector widget."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from placy_proximity.domain.models.travel_mode import MODE_LABEL, TravelMode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from placy_proximity.domain.contracts.mode_broadcaster import ModeBroadcasterProtocol
    from placy_proximity.domain.models.travel_mode_changed import TravelModeChanged

logger = logging.getLogger(__name__)


class TravelModeSelector:
    """Mode buttons that publish to the page bus and mirror the selection of other selectors."""

    def __init__(
        self,
        bus: ModeBroadcasterProtocol,
        modes: Iterable[TravelMode | str] = tuple(TravelMode),
    ) -> None:
        """Initialize the selector.

        Args:
            bus: The page's mode broadcaster.
            modes: Modes offered as buttons, in display order.
        """
        self.bus = bus
        self.modes: tuple[TravelMode, ...] = tuple(TravelMode(mode) for mode in modes)
        self.active_mode = bus.current_mode
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def label(self) -> str:
        """Label shown next to the buttons, e.g. "GANGTID"."""
        return MODE_LABEL[self.active_mode]

    def is_active(self, mode: TravelMode) -> bool:
        """Whether the button for a mode is shown pressed."""
        return mode in self.modes and mode == self.active_mode

    def attach(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.bus.subscribe(self._on_mode_changed)
        self.active_mode = self.bus.current_mode

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def click(self, mode: TravelMode | str) -> None:
        """Select a mode for the whole page.

        Raises:
            ValueError: If the selector has no button for the mode.
        """
        selected = TravelMode(mode)
        if selected not in self.modes:
            raise ValueError(f"Selector has no button for mode: {selected.value}")
        logger.debug(f"Travel mode button clicked: {selected.value}")
        self.bus.set_mode(selected)

    def _on_mode_changed(self, event: TravelModeChanged) -> None:
        self.active_mode = event.mode
