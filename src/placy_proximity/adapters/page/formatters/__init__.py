"""Formatters for page output."""

from placy_proximity.adapters.page.formatters.departure_time_formatter import (
    DepartureTimeFormatter,
)

__all__ = ["DepartureTimeFormatter"]
