"""Formatter for bus departure times."""

import math
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from placy_proximity.adapters.config.app_config import AppConfig
from placy_proximity.domain.contracts.departure_time_formatter import (
    DepartureTimeFormatterProtocol,
)
from placy_proximity.domain.models.formatted_departure_time import FormattedDepartureTime

NOW_TEXT = "Nå"
MISSING_TEXT = "-"
SOON_MINUTES = 10


class DepartureTimeFormatter(DepartureTimeFormatterProtocol):
    """Formats departure times relative to now, switching to HH:MM beyond an hour."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with the display timezone.
        """
        self.config = config

    def format_departure_time(
        self, departure_time: datetime | str | None, now: datetime | None = None
    ) -> FormattedDepartureTime:
        """Format a departure time as "Nå", "{n} min" or "HH:MM"."""
        server_timezone = ZoneInfo(self.config.timezone)
        departure = self._coerce(departure_time, server_timezone)
        if departure is None:
            return FormattedDepartureTime(text=MISSING_TEXT)

        now = now or datetime.now(UTC)
        diff_seconds = (departure - now).total_seconds()
        if diff_seconds < 60:
            return FormattedDepartureTime(text=NOW_TEXT, now=True)

        # Round half up to whole minutes
        diff_minutes = math.floor(diff_seconds / 60 + 0.5)
        if diff_minutes < SOON_MINUTES:
            return FormattedDepartureTime(text=f"{diff_minutes} min", soon=True)
        if diff_minutes < 60:
            return FormattedDepartureTime(text=f"{diff_minutes} min")
        return FormattedDepartureTime(text=departure.astimezone(server_timezone).strftime("%H:%M"))

    @staticmethod
    def _coerce(value: datetime | str | None, tz: ZoneInfo) -> datetime | None:
        """Turn an ISO string or datetime into an aware datetime; naive values use tz."""
        if not value:
            return None
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=tz)
        return value
