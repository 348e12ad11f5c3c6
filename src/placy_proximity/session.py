"""Wiring of one page's widgets and their shared collaborators."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

import aiohttp

from placy_proximity.adapters.page.broadcasters import ModeBroadcastBus
from placy_proximity.adapters.page.cache import AvailabilityCache
from placy_proximity.adapters.page.dataset import resolve_origin, station_request_from_dataset
from placy_proximity.adapters.page.fetchers import AvailabilityFetcher
from placy_proximity.adapters.page.formatters import DepartureTimeFormatter
from placy_proximity.adapters.page.widgets import (
    AccordionController,
    ProximityTimeline,
    TravelModeSelector,
)
from placy_proximity.adapters.placy_api import PlacyAvailabilityRepository, default_parsers
from placy_proximity.application.services import TravelTimeEstimator
from placy_proximity.domain.errors import MissingCoordinatesError
from placy_proximity.domain.models.integration_kind import IntegrationKind
from placy_proximity.domain.models.travel_mode import TravelMode

if TYPE_CHECKING:
    from types import TracebackType

    from placy_proximity.adapters.config import AppConfig
    from placy_proximity.domain.models.coordinate import Coordinate
    from placy_proximity.domain.ports import AvailabilityRepository

logger = logging.getLogger(__name__)


class PageSession:
    """Owns the per-page mode bus, availability cache and fetcher, and builds widgets.

    Every widget created here receives the same collaborators by reference. Use as an
    async context manager; an aiohttp session is created if none is supplied.
    """

    def __init__(
        self,
        config: AppConfig,
        origin: Coordinate | None = None,
        session: aiohttp.ClientSession | None = None,
        repository: AvailabilityRepository | None = None,
    ) -> None:
        """Initialize the page session.

        Args:
            config: Application configuration.
            origin: Property coordinate; read from the config file when omitted.
                The config file's [api] and [travel] overrides apply either way.
            session: Optional aiohttp session shared with the caller.
            repository: Optional availability repository, replaces the REST adapter.
        """
        if config.config_file:
            config.load_overrides()
        self.config = config
        self.origin = origin if origin is not None else self._origin_from_config(config)
        self._session = session
        self._owns_session = False
        self._repository = repository

        self.bus = ModeBroadcastBus(config.default_travel_mode)
        self.cache = AvailabilityCache(ttl_seconds=config.availability_cache_ttl_seconds)
        self.estimator = TravelTimeEstimator()
        self.formatter = DepartureTimeFormatter(config)
        self._fetcher: AvailabilityFetcher | None = None
        self._widgets: list[Any] = []

    @classmethod
    def for_page(
        cls,
        config: AppConfig,
        start_location: Sequence[float] | None = None,
        project_coords_attr: str | None = None,
        **kwargs: Any,
    ) -> PageSession:
        """Create a session for a page, resolving the origin from its map config or markup.

        Falls back to the config file origin when neither source resolves.
        """
        return cls(config, origin=resolve_origin(start_location, project_coords_attr), **kwargs)

    @staticmethod
    def _origin_from_config(config: AppConfig) -> Coordinate | None:
        if not config.config_file:
            return None
        return config.get_origin()

    def require_origin(self) -> Coordinate:
        """Return the property coordinate, for widgets that cannot work without it."""
        if self.origin is None:
            raise MissingCoordinatesError("Page has no project coordinates")
        return self.origin

    async def __aenter__(self) -> PageSession:
        if self._repository is None:
            if self._session is None:
                self._session = aiohttp.ClientSession()
                self._owns_session = True
            self._repository = PlacyAvailabilityRepository(
                self.config.api_base_url,
                session=self._session,
                timeout_seconds=self.config.request_timeout_seconds,
            )
        self._fetcher = AvailabilityFetcher(
            self._repository,
            self.cache,
            default_parsers(self.config.bus_max_departures),
        )
        logger.info(f"Page session started (mode: {self.bus.current_mode.value})")
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for widget in self._widgets:
            widget.detach()
        self._widgets.clear()
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._owns_session = False
        logger.info("Page session closed")

    @property
    def fetcher(self) -> AvailabilityFetcher:
        if self._fetcher is None:
            raise RuntimeError("PageSession must be entered before fetching availability")
        return self._fetcher

    def create_timeline(self, card_datasets: Iterable[Mapping[str, str]]) -> ProximityTimeline:
        """Create and attach a proximity timeline for the given cards."""
        timeline = ProximityTimeline.from_datasets(
            self.bus, self.estimator, self.origin, card_datasets
        )
        timeline.attach()
        self._widgets.append(timeline)
        return timeline

    def create_mode_selector(
        self, modes: Iterable[TravelMode | str] = tuple(TravelMode)
    ) -> TravelModeSelector:
        """Create and attach a travel mode selector with buttons for the given modes."""
        selector = TravelModeSelector(self.bus, modes)
        selector.attach()
        self._widgets.append(selector)
        return selector

    def create_accordion(
        self, kind: IntegrationKind | str, dataset: Mapping[str, str]
    ) -> AccordionController:
        """Create the accordion controller for one station row."""
        request = station_request_from_dataset(IntegrationKind(kind), dataset)
        if request is None:
            logger.debug(f"Station row without {IntegrationKind(kind).value} station id")
        accordion = AccordionController(request, self.fetcher, self.formatter)
        self._widgets.append(accordion)
        return accordion
