"""View state for the loading/data/error containers of a station accordion."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from placy_proximity.adapters.placy_api.constants import BIKE_LOW_THRESHOLD, CAR_LOW_THRESHOLD
from placy_proximity.domain.models.integration_kind import IntegrationKind

if TYPE_CHECKING:
    from placy_proximity.domain.contracts.departure_time_formatter import (
        DepartureTimeFormatterProtocol,
    )
    from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot

NO_DEPARTURES_TEXT = "Ingen planlagte avganger"
UNKNOWN_LINE_TEXT = "?"
UNKNOWN_DESTINATION_TEXT = "Ukjent"

ERROR_MESSAGES: dict[IntegrationKind, str] = {
    IntegrationKind.BUS: "Kunne ikke hente avganger",
    IntegrationKind.BIKE: "Kunne ikke hente tilgjengelighet",
    IntegrationKind.CAR: "Kunne ikke hente tilgjengelighet",
}


@dataclass(frozen=True)
class DepartureRow:
    """One rendered departure line."""

    line: str
    destination: str
    time_text: str
    soon: bool = False
    now: bool = False
    is_airport: bool = False


@dataclass(frozen=True)
class CountBadge:
    """One rendered availability count."""

    resource: str
    value: int
    low: bool = False
    empty: bool = False


@dataclass
class AvailabilityView:
    """Visible state of one accordion body.

    Exactly one of the loading, data and error containers is visible at a time once
    the row has been opened.
    """

    loading_visible: bool = False
    data_visible: bool = False
    error_visible: bool = False
    error_message: str = ""
    empty_message: str = ""
    rows: list[DepartureRow] = field(default_factory=list)
    badges: list[CountBadge] = field(default_factory=list)

    def show_loading(self) -> None:
        self.loading_visible = True
        self.data_visible = False
        self.error_visible = False

    def show_error(self, message: str) -> None:
        self.loading_visible = False
        self.data_visible = False
        self.error_visible = True
        self.error_message = message

    def show_departures(self, rows: list[DepartureRow]) -> None:
        self.rows = rows
        self.badges = []
        self.empty_message = "" if rows else NO_DEPARTURES_TEXT
        self._show_data()

    def show_counts(self, badges: list[CountBadge]) -> None:
        self.badges = badges
        self.rows = []
        self.empty_message = ""
        self._show_data()

    def _show_data(self) -> None:
        self.loading_visible = False
        self.data_visible = True
        self.error_visible = False


def build_departure_rows(
    snapshot: AvailabilitySnapshot,
    formatter: DepartureTimeFormatterProtocol,
    now: datetime | None = None,
) -> list[DepartureRow]:
    """Format the departures of a bus snapshot for display."""
    rows = []
    for departure in snapshot.departures:
        formatted = formatter.format_departure_time(departure.departure_time, now)
        rows.append(
            DepartureRow(
                line=departure.line or UNKNOWN_LINE_TEXT,
                destination=departure.destination or UNKNOWN_DESTINATION_TEXT,
                time_text=formatted.text,
                soon=formatted.soon,
                now=formatted.now,
                is_airport=departure.is_airport,
            )
        )
    return rows


def build_count_badges(snapshot: AvailabilitySnapshot) -> list[CountBadge]:
    """Build the count badges for a bike or car snapshot."""
    if snapshot.kind is IntegrationKind.BIKE:
        return [
            CountBadge(
                resource=resource,
                value=snapshot.count(resource),
                low=snapshot.count(resource) < BIKE_LOW_THRESHOLD,
                empty=snapshot.count(resource) == 0,
            )
            for resource in ("bikes", "docks")
        ]

    vehicles = snapshot.count("vehicles")
    return [
        CountBadge(
            resource="vehicles",
            value=vehicles,
            low=0 < vehicles < CAR_LOW_THRESHOLD,
            empty=vehicles == 0,
        )
    ]
