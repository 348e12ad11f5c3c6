"""Protocol for broadcasting travel mode changes."""

from collections.abc import Callable
from typing import Protocol

from placy_proximity.domain.models.travel_mode import TravelMode
from placy_proximity.domain.models.travel_mode_changed import TravelModeChanged

ModeChangeHandler = Callable[[TravelModeChanged], None]


class ModeBroadcasterProtocol(Protocol):
    """Page-scoped holder of the selected travel mode with publish/subscribe."""

    @property
    def current_mode(self) -> TravelMode:
        """The currently selected travel mode."""
        ...

    def set_mode(self, mode: TravelMode | str) -> None:
        """Select a mode and notify subscribers if it changed."""
        ...

    def subscribe(self, handler: ModeChangeHandler) -> Callable[[], None]:
        """Register a handler for subsequent mode changes.

        Returns:
            Callable that removes the handler again.
        """
        ...
