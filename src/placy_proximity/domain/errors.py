"""Exception hierarchy for placy_proximity."""

from __future__ import annotations


class PlacyError(Exception):
    """Base exception for all placy_proximity errors."""


class FetchFailedError(PlacyError):
    """Live availability could not be fetched for a station."""


class NetworkError(FetchFailedError):
    """HTTP-level failure (request rejected, timed out, or non-2xx status)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class MalformedResponseError(FetchFailedError):
    """Endpoint answered but reported `success: false` or returned unusable data."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class MissingCoordinatesError(PlacyError):
    """A widget has no usable latitude/longitude to estimate from."""
