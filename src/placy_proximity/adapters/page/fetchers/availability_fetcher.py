"""Availability fetcher implementation."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from placy_proximity.domain.contracts.availability_cache import AvailabilityCacheProtocol
    from placy_proximity.domain.contracts.availability_parser import AvailabilityParserProtocol
    from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot
    from placy_proximity.domain.models.integration_kind import IntegrationKind
    from placy_proximity.domain.models.station_request import StationRequest
    from placy_proximity.domain.ports import AvailabilityRepository

logger = logging.getLogger(__name__)


class AvailabilityFetcher:
    """Fetches live availability per station, caching where the integration allows it.

    Bike and car snapshots are fetched once and served from the cache afterwards.
    Bus departures are time-sensitive and always fetched fresh. Concurrent identical
    requests share one in-flight task instead of issuing duplicate calls.
    """

    def __init__(
        self,
        repository: AvailabilityRepository,
        cache: AvailabilityCacheProtocol,
        parsers: dict[IntegrationKind, AvailabilityParserProtocol],
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            repository: Repository for fetching raw availability data.
            cache: Cache for bike and car snapshots.
            parsers: Response parser per integration kind.
            clock: Source of fetch timestamps, defaults to UTC now.
        """
        self.repository = repository
        self.cache = cache
        self.parsers = parsers
        self._clock = clock or (lambda: datetime.now(UTC))
        self._in_flight: dict[tuple[str, ...], asyncio.Task[AvailabilitySnapshot]] = {}

    def is_in_flight(self, request: StationRequest) -> bool:
        """Whether a fetch for this exact request is currently running."""
        return request.key in self._in_flight

    def cached(self, request: StationRequest) -> AvailabilitySnapshot | None:
        """Return the cached snapshot for a cacheable request, without fetching."""
        if not request.kind.is_cacheable:
            return None
        return self.cache.get(request.kind, request.station_id)

    async def fetch(self, request: StationRequest) -> AvailabilitySnapshot:
        """Get availability for one station.

        Args:
            request: The station to fetch.

        Returns:
            Cached or freshly fetched snapshot.

        Raises:
            FetchFailedError: If the request fails or the payload is unusable.
        """
        cached = self.cached(request)
        if cached is not None:
            logger.debug(f"Using cached {request.kind.value} availability for {request.station_id}")
            return cached

        task = self._in_flight.get(request.key)
        if task is None:
            task = asyncio.create_task(self._fetch_fresh(request))
            self._in_flight[request.key] = task
            task.add_done_callback(lambda t, key=request.key: self._forget(key, t))
        else:
            logger.debug(f"Joining in-flight {request.kind.value} fetch for {request.station_id}")

        # Shielded so one cancelled caller does not cancel the fetch for the others
        return await asyncio.shield(task)

    def _forget(self, key: tuple[str, ...], task: asyncio.Task[AvailabilitySnapshot]) -> None:
        """Drop a finished task from the in-flight map."""
        if self._in_flight.get(key) is task:
            del self._in_flight[key]
        # Marks a failure as retrieved when every awaiting caller was cancelled
        if not task.cancelled():
            task.exception()

    async def _fetch_fresh(self, request: StationRequest) -> AvailabilitySnapshot:
        """Fetch and parse one station, storing cacheable results."""
        data = await self.repository.get_availability(request)
        snapshot = self.parsers[request.kind].parse(request, data, self._clock())

        if request.kind.is_cacheable:
            self.cache.set(snapshot)
        logger.debug(f"Fetched {request.kind.value} availability for station {request.station_id}")
        return snapshot
