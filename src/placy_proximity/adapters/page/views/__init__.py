"""View state for page widgets."""

from placy_proximity.adapters.page.views.availability_view import (
    ERROR_MESSAGES,
    AvailabilityView,
    CountBadge,
    DepartureRow,
    build_count_badges,
    build_departure_rows,
)

__all__ = [
    "ERROR_MESSAGES",
    "AvailabilityView",
    "CountBadge",
    "DepartureRow",
    "build_count_badges",
    "build_departure_rows",
]
