"""Protocol for formatting bus departure times."""

from datetime import datetime
from typing import Protocol

from placy_proximity.domain.models.formatted_departure_time import FormattedDepartureTime


class DepartureTimeFormatterProtocol(Protocol):
    """Protocol for formatting departure times relative to now."""

    def format_departure_time(
        self, departure_time: datetime | str | None, now: datetime | None = None
    ) -> FormattedDepartureTime:
        """Format a departure time ("Nå", "7 min" or "14:30").

        Args:
            departure_time: Departure as datetime or ISO 8601 string, or None.
            now: Reference time, defaults to the current time.

        Returns:
            Display text with `soon` and `now` flags.
        """
        ...
