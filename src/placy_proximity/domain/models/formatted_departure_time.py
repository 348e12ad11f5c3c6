"""Formatted departure time domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormattedDepartureTime:
    """Display text for a departure plus its urgency flags."""

    text: str
    soon: bool = False
    now: bool = False
