"""Travel mode domain model."""

from enum import StrEnum


class TravelMode(StrEnum):
    """How the visitor travels from the property to a point of interest."""

    WALK = "walk"
    BIKE = "bike"
    DRIVE = "drive"


# Average speeds in km/h. Rough heuristics, not routing-engine output.
MODE_SPEED_KMH: dict[TravelMode, float] = {
    TravelMode.WALK: 5.0,
    TravelMode.BIKE: 15.0,
    TravelMode.DRIVE: 40.0,
}

# Selector label shown next to the mode buttons
MODE_LABEL: dict[TravelMode, str] = {
    TravelMode.WALK: "GANGTID",
    TravelMode.BIKE: "SYKKELTID",
    TravelMode.DRIVE: "KJØRETID",
}

# Suffix used in timeline badges, e.g. "4 min til fots"
MODE_TEXT: dict[TravelMode, str] = {
    TravelMode.WALK: "til fots",
    TravelMode.BIKE: "sykkel",
    TravelMode.DRIVE: "bil",
}

MODE_ICON: dict[TravelMode, str] = {
    TravelMode.WALK: "fa-shoe-prints",
    TravelMode.BIKE: "fa-bicycle",
    TravelMode.DRIVE: "fa-car",
}
