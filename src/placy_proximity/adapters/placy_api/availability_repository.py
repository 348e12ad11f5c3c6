"""Availability repository adapter backed by the Placy REST API."""

import logging
from typing import TYPE_CHECKING, Any

from placy_proximity.adapters.placy_api.http_client import PlacyHttpClient
from placy_proximity.domain.models.station_request import StationRequest
from placy_proximity.domain.ports.availability_repository import AvailabilityRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class PlacyAvailabilityRepository(AvailabilityRepository):
    """Adapter for live bus, bike and car availability via the Placy REST API."""

    def __init__(
        self,
        base_url: str,
        session: "ClientSession | None" = None,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with the REST base URL and optional aiohttp session.

        Args:
            base_url: Placy REST namespace, e.g. "https://example.no/wp-json/placy/v1".
            session: Optional aiohttp ClientSession for HTTP requests.
            timeout_seconds: Total timeout per request.
        """
        self._http_client = PlacyHttpClient(
            base_url, session=session, timeout_seconds=timeout_seconds
        )

    async def get_availability(self, request: StationRequest) -> Any:
        """Get the live data for one station."""
        return await self._http_client.fetch(request)
