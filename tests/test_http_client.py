"""Tests for PlacyHttpClient request building and envelope handling."""

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from placy_proximity.adapters.placy_api import PlacyAvailabilityRepository, PlacyHttpClient
from placy_proximity.domain.errors import MalformedResponseError, NetworkError
from placy_proximity.domain.models import IntegrationKind, StationRequest

BASE_URL = "https://placy.example/wp-json/placy/v1"


def make_session(status: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    """Create a mock aiohttp session whose get() yields one canned response."""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get = MagicMock(return_value=context)
    return session


class TestRequestBuilding:
    """Tests for endpoint URLs and query parameters."""

    def test_when_bus_request_then_url_and_params_include_quay(self) -> None:
        """Given a bus stop with quay, when building, then quay_id is a query parameter."""
        client = PlacyHttpClient(BASE_URL + "/")
        request = StationRequest(
            station_id="NSR:StopPlace:41613",
            kind=IntegrationKind.BUS,
            secondary_id="NSR:Quay:71184",
            line_filter="3,FB73",
        )

        assert (
            client.build_url(request)
            == f"{BASE_URL}/entur/departures/NSR%3AStopPlace%3A41613"
        )
        assert client.build_params(request) == {
            "quay_id": "NSR:Quay:71184",
            "line_filter": "3,FB73",
        }

    def test_when_bike_and_car_requests_then_no_params(self) -> None:
        """Given bike and car stations, when building, then they use their own endpoints."""
        client = PlacyHttpClient(BASE_URL)
        bike = StationRequest(station_id="42", kind=IntegrationKind.BIKE)
        car = StationRequest(station_id="7", kind=IntegrationKind.CAR)

        assert client.build_url(bike) == f"{BASE_URL}/bysykkel/availability/42"
        assert client.build_url(car) == f"{BASE_URL}/hyre/availability/7"
        assert client.build_params(bike) == {}
        assert client.build_params(car) == {}


class TestFetch:
    """Tests for response envelope handling."""

    @pytest.mark.asyncio
    async def test_when_success_then_returns_data_member(self) -> None:
        """Given a successful envelope, when fetching, then the data member is returned."""
        session = make_session(
            payload={"success": True, "data": {"num_bikes_available": 2, "num_docks_available": 9}}
        )
        client = PlacyHttpClient(BASE_URL, session=session)

        data = await client.fetch(StationRequest(station_id="42", kind=IntegrationKind.BIKE))

        assert data == {"num_bikes_available": 2, "num_docks_available": 9}
        args, kwargs = session.get.call_args
        assert args[0] == f"{BASE_URL}/bysykkel/availability/42"
        assert kwargs["params"] == {}

    @pytest.mark.asyncio
    async def test_when_fetching_then_request_is_logged_with_station(self) -> None:
        """Given a bus request, when fetching, then the station, URL and params are logged."""
        session = make_session(payload={"success": True, "data": []})
        client = PlacyHttpClient(BASE_URL, session=session)
        request = StationRequest("NSR:StopPlace:1", IntegrationKind.BUS, "NSR:Quay:2")

        with patch(
            "placy_proximity.adapters.placy_api.http_client.log_station_request"
        ) as mock_log:
            await client.fetch(request)

        mock_log.assert_called_once_with(
            request, f"{BASE_URL}/entur/departures/NSR%3AStopPlace%3A1", {"quay_id": "NSR:Quay:2"}
        )

    @pytest.mark.asyncio
    async def test_when_success_false_then_raises_malformed_with_message(self) -> None:
        """Given success false, when fetching, then MalformedResponseError carries the message."""
        session = make_session(payload={"success": False, "message": "x"})
        client = PlacyHttpClient(BASE_URL, session=session)

        with pytest.raises(MalformedResponseError, match="x"):
            await client.fetch(StationRequest(station_id="42", kind=IntegrationKind.BIKE))

    @pytest.mark.asyncio
    async def test_when_payload_not_an_object_then_raises_malformed(self) -> None:
        """Given a JSON list body, when fetching, then MalformedResponseError."""
        session = make_session(payload=[1, 2, 3])
        client = PlacyHttpClient(BASE_URL, session=session)

        with pytest.raises(MalformedResponseError):
            await client.fetch(StationRequest(station_id="7", kind=IntegrationKind.CAR))

    @pytest.mark.asyncio
    async def test_when_status_not_2xx_then_raises_network_error(self) -> None:
        """Given a 502, when fetching, then NetworkError with the status code."""
        session = make_session(status=502, text="Bad Gateway")
        client = PlacyHttpClient(BASE_URL, session=session)

        with pytest.raises(NetworkError) as exc_info:
            await client.fetch(StationRequest(station_id="7", kind=IntegrationKind.CAR))

        assert exc_info.value.status_code == 502
        assert exc_info.value.endpoint == f"{BASE_URL}/hyre/availability/7"

    @pytest.mark.asyncio
    async def test_when_connection_fails_then_raises_network_error(self) -> None:
        """Given a connection error, when fetching, then NetworkError."""
        session = MagicMock()
        session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client = PlacyHttpClient(BASE_URL, session=session)

        with pytest.raises(NetworkError, match="refused"):
            await client.fetch(StationRequest(station_id="7", kind=IntegrationKind.CAR))

    @pytest.mark.asyncio
    async def test_when_request_times_out_then_raises_network_error(self) -> None:
        """Given a timeout, when fetching, then NetworkError."""
        session = make_session()
        session.get.return_value.__aenter__ = AsyncMock(side_effect=asyncio.TimeoutError())
        client = PlacyHttpClient(BASE_URL, session=session)

        with pytest.raises(NetworkError):
            await client.fetch(StationRequest(station_id="NSR:1", kind=IntegrationKind.BUS))

    @pytest.mark.asyncio
    async def test_when_no_session_then_raises_runtime_error(self) -> None:
        """Given no session, when fetching, then RuntimeError."""
        client = PlacyHttpClient(BASE_URL)

        with pytest.raises(RuntimeError, match="aiohttp session"):
            await client.fetch(StationRequest(station_id="42", kind=IntegrationKind.BIKE))


@pytest.mark.asyncio
async def test_repository_delegates_to_http_client() -> None:
    """Given a repository, when getting availability, then the bus data list is returned."""
    departures = [{"line": "3", "destination": "Lohove"}]
    session = make_session(payload={"success": True, "data": departures})
    repository = PlacyAvailabilityRepository(BASE_URL, session=session, timeout_seconds=5)

    data = await repository.get_availability(
        StationRequest(station_id="NSR:1", kind=IntegrationKind.BUS, secondary_id="Q1")
    )

    assert data == departures
    _, kwargs = session.get.call_args
    assert kwargs["params"] == {"quay_id": "Q1"}
    assert kwargs["timeout"].total == 5
