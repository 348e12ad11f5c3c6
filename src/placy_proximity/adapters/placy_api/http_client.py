"""HTTP client for the Placy REST API."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from placy_proximity.adapters.placy_api.constants import DEFAULT_HEADERS, ENDPOINT_PATHS
from placy_proximity.adapters.placy_api.request_logging import log_station_request
from placy_proximity.domain.errors import MalformedResponseError, NetworkError
from placy_proximity.domain.models.integration_kind import IntegrationKind
from placy_proximity.domain.models.station_request import StationRequest

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class PlacyHttpClient:
    """HTTP client for the live availability endpoints of the Placy REST namespace."""

    def __init__(
        self,
        base_url: str,
        session: "ClientSession | None" = None,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with the REST base URL and optional aiohttp session."""
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def build_url(self, request: StationRequest) -> str:
        """Build the endpoint URL for a station."""
        path = ENDPOINT_PATHS[request.kind]
        return f"{self._base_url}{path}/{quote(request.station_id, safe='')}"

    @staticmethod
    def build_params(request: StationRequest) -> dict[str, str]:
        """Build query parameters; only bus departures take any."""
        if request.kind is not IntegrationKind.BUS:
            return {}
        params: dict[str, str] = {}
        if request.secondary_id:
            params["quay_id"] = request.secondary_id
        if request.transport_mode:
            params["transport_mode"] = request.transport_mode
        if request.line_filter:
            params["line_filter"] = request.line_filter
        return params

    async def _read_envelope(self, response: "ClientResponse", url: str) -> dict[str, Any]:
        """Read and validate the `{success, data, message}` envelope."""
        if not 200 <= response.status < 300:
            response_text = await response.text()
            raise NetworkError(
                f"Placy API returned status {response.status}: {response_text[:200]}",
                status_code=response.status,
                endpoint=url,
            )

        try:
            payload = await response.json(content_type=None)
        except ValueError as e:
            raise MalformedResponseError(f"Invalid JSON from {url}: {e}", endpoint=url) from e

        if not isinstance(payload, dict):
            raise MalformedResponseError(f"Unexpected payload type from {url}", endpoint=url)
        if not payload.get("success"):
            raise MalformedResponseError(
                str(payload.get("message") or "Unknown error"), endpoint=url
            )
        return payload

    async def fetch(self, request: StationRequest) -> Any:
        """Fetch the `data` member of a successful response.

        Args:
            request: Station to fetch.

        Returns:
            The `data` member (list for bus, dict for bike and car).

        Raises:
            NetworkError: If the request fails, times out or returns non-2xx.
            MalformedResponseError: If the envelope reports failure.
        """
        if not self._session:
            raise RuntimeError("Placy API requires an aiohttp session")

        url = self.build_url(request)
        params = self.build_params(request)
        log_station_request(request, url, params)

        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                payload = await self._read_envelope(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Request to {url} failed: {e}", endpoint=url) from e

        logger.debug(f"Fetched {request.kind.value} availability for station {request.station_id}")
        return payload.get("data")
