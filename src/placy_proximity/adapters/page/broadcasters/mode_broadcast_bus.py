"""Page-scoped broadcaster for travel mode changes."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from placy_proximity.domain.contracts.mode_broadcaster import ModeBroadcasterProtocol
from placy_proximity.domain.models.travel_mode import TravelMode
from placy_proximity.domain.models.travel_mode_changed import TravelModeChanged

if TYPE_CHECKING:
    from collections.abc import Callable

    from placy_proximity.domain.contracts.mode_broadcaster import ModeChangeHandler

logger = logging.getLogger(__name__)


class ModeBroadcastBus(ModeBroadcasterProtocol):
    """Holds the selected travel mode for one page and notifies subscribed widgets.

    Notification is synchronous and in subscription order. A mode set from inside a
    handler is applied after the running notification pass has finished, so passes
    never interleave.
    """

    def __init__(self, initial_mode: TravelMode | str = TravelMode.WALK) -> None:
        """Initialize the bus.

        Args:
            initial_mode: Mode selected before any user interaction.
        """
        self._mode = TravelMode(initial_mode)
        self._handlers: list[ModeChangeHandler] = []
        self._pending: deque[TravelMode] = deque()
        self._notifying = False

    @property
    def current_mode(self) -> TravelMode:
        """The currently selected travel mode."""
        return self._mode

    @property
    def subscriber_count(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)

    def subscribe(self, handler: ModeChangeHandler) -> Callable[[], None]:
        """Register a handler invoked on every subsequent mode change.

        Args:
            handler: Called with a TravelModeChanged event.

        Returns:
            Callable that unsubscribes the handler; safe to call more than once.
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def set_mode(self, mode: TravelMode | str) -> None:
        """Select a travel mode.

        Args:
            mode: New mode, as TravelMode or its string value.

        Raises:
            ValueError: If the mode is not walk, bike or drive.
        """
        new_mode = TravelMode(mode)
        if self._notifying:
            self._pending.append(new_mode)
            return

        self._apply(new_mode)
        while self._pending:
            self._apply(self._pending.popleft())

    def _apply(self, mode: TravelMode) -> None:
        """Update state and notify every handler if the mode changed."""
        if mode == self._mode:
            return

        event = TravelModeChanged(mode=mode, previous_mode=self._mode)
        self._mode = mode
        logger.info(f"Travel mode changed to: {mode.value}")

        self._notifying = True
        try:
            for handler in list(self._handlers):
                self._notify(handler, event)
        finally:
            self._notifying = False

    @staticmethod
    def _notify(handler: ModeChangeHandler, event: TravelModeChanged) -> None:
        """Invoke one handler, keeping its failure local to that widget."""
        try:
            handler(event)
        except Exception as e:
            logger.error(f"Travel mode handler failed: {e}", exc_info=True)
