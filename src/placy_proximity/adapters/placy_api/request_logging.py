"""Optional logging of outgoing availability requests, enabled by PLACY_LOG_REQUESTS."""

import logging
import os
from collections.abc import Mapping
from urllib.parse import urlencode

from placy_proximity.domain.models.integration_kind import IntegrationKind
from placy_proximity.domain.models.station_request import StationRequest

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "PLACY_LOG_REQUESTS"


def request_logging_enabled() -> bool:
    return os.getenv(LOG_REQUESTS_ENV, "").lower() in {"1", "true", "yes"}


def describe_station_request(request: StationRequest) -> str:
    """Summarize what a station row asked for, e.g. "bus NSR:StopPlace:1 quay=NSR:Quay:2"."""
    parts = [request.kind.value, request.station_id]
    if request.kind is IntegrationKind.BUS:
        if request.secondary_id:
            parts.append(f"quay={request.secondary_id}")
        if request.transport_mode:
            parts.append(f"mode={request.transport_mode}")
        if request.line_filter:
            parts.append(f"lines={request.line_filter}")
    return " ".join(parts)


def log_station_request(
    request: StationRequest, url: str, params: Mapping[str, str] | None = None
) -> None:
    """Log the station and the exact GET issued for it, if request logging is enabled."""
    if not request_logging_enabled():
        return

    full_url = f"{url}?{urlencode(sorted(params.items()))}" if params else url
    logger.info(f"Availability request ({describe_station_request(request)}): GET {full_url}")
