"""Accordion state domain model."""

from enum import StrEnum


class AccordionState(StrEnum):
    """Content state of a station accordion row."""

    CLOSED = "closed"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"
