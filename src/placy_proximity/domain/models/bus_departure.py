"""Bus departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BusDeparture:
    """A single upcoming departure from a stop place."""

    line: str
    destination: str
    departure_time: datetime | None
    is_airport: bool = False
