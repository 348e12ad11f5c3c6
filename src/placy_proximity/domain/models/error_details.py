"""Error details domain model."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ErrorKind(StrEnum):
    """Categories of failures a widget can surface."""

    FETCH_FAILED = "fetch_failed"
    MISSING_COORDINATES = "missing_coordinates"


class ErrorDetails(BaseModel):
    """Details about a widget-level error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = ErrorKind.FETCH_FAILED
    status_code: int | None = None
    reason: str
