"""Accordion controller for station rows with live availability."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from placy_proximity.adapters.page.views.availability_view import (
    ERROR_MESSAGES,
    AvailabilityView,
    build_count_badges,
    build_departure_rows,
)
from placy_proximity.domain.errors import NetworkError
from placy_proximity.domain.models.accordion_state import AccordionState
from placy_proximity.domain.models.error_details import ErrorDetails, ErrorKind
from placy_proximity.domain.models.integration_kind import IntegrationKind

if TYPE_CHECKING:
    from placy_proximity.adapters.page.fetchers.availability_fetcher import AvailabilityFetcher
    from placy_proximity.domain.contracts.departure_time_formatter import (
        DepartureTimeFormatterProtocol,
    )
    from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot
    from placy_proximity.domain.models.station_request import StationRequest

logger = logging.getLogger(__name__)

TOGGLE_KEYS = frozenset({"Enter", " "})


class AccordionController:
    """Expand/collapse controller for one station row.

    Opening a row loads availability through the fetcher and renders loading, then
    data or error. Closing never cancels a running fetch; its result is still
    written to the view unless the row has been detached from the page.
    """

    def __init__(
        self,
        request: StationRequest | None,
        fetcher: AvailabilityFetcher,
        formatter: DepartureTimeFormatterProtocol,
        view: AvailabilityView | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            request: Station to load on open; None renders nothing (row without live data).
            fetcher: Shared availability fetcher of the page.
            formatter: Formatter for bus departure times.
            view: View state to render into.
        """
        self.request = request
        self.fetcher = fetcher
        self.formatter = formatter
        self.view = view or AvailabilityView()
        self.is_open = False
        self.attached = True
        self.error: ErrorDetails | None = None
        self._content_state: AccordionState | None = None

    @property
    def state(self) -> AccordionState:
        """Closed, or the content state of the open row."""
        if not self.is_open:
            return AccordionState.CLOSED
        return self._content_state or AccordionState.LOADED

    @property
    def aria_expanded(self) -> str:
        return "true" if self.is_open else "false"

    async def handle_click(self, on_map_button: bool = False) -> None:
        """Toggle on a header click, unless the click landed on the "show on map" control."""
        if on_map_button:
            return
        await self.activate()

    async def handle_key(self, key: str) -> None:
        """Toggle on Enter or Space, like a click on a role="button" header."""
        if key not in TOGGLE_KEYS:
            return
        await self.activate()

    async def activate(self) -> None:
        """Toggle the row; opening loads availability."""
        if self.is_open:
            self.is_open = False
            return

        self.is_open = True
        await self._load()

    def detach(self) -> None:
        """Mark the row as removed from the page; late fetch results are dropped."""
        self.attached = False

    async def _load(self) -> None:
        """Load availability for the row and render the outcome."""
        if self.request is None:
            return

        cached = self.fetcher.cached(self.request)
        if cached is not None:
            self._render(cached)
            return

        self._content_state = AccordionState.LOADING
        self.error = None
        self.view.show_loading()

        try:
            snapshot = await self.fetcher.fetch(self.request)
        except Exception as e:
            self._render_error(self.request, e)
            return

        self._render(snapshot)

    def _render(self, snapshot: AvailabilitySnapshot) -> None:
        """Render a snapshot into the view."""
        if not self.attached:
            logger.debug(f"Dropping availability for detached row {snapshot.station_id}")
            return

        if snapshot.kind is IntegrationKind.BUS:
            self.view.show_departures(build_departure_rows(snapshot, self.formatter))
        else:
            self.view.show_counts(build_count_badges(snapshot))
        self._content_state = AccordionState.LOADED
        self.error = None

    def _render_error(self, request: StationRequest, error: Exception) -> None:
        """Switch the row into its error state and log the cause."""
        kind = request.kind
        logger.error(
            f"{kind.value.capitalize()} availability error for station "
            f"{request.station_id}: {error}",
            exc_info=True,
        )
        if not self.attached:
            return

        self.error = ErrorDetails(
            kind=ErrorKind.FETCH_FAILED,
            status_code=error.status_code if isinstance(error, NetworkError) else None,
            reason=str(error),
        )
        self._content_state = AccordionState.ERROR
        self.view.show_error(ERROR_MESSAGES[kind])
