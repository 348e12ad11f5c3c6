"""Reading widget data from the `data-*` attributes emitted by the block templates."""

import json
import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from placy_proximity.domain.models.coordinate import Coordinate
from placy_proximity.domain.models.integration_kind import IntegrationKind
from placy_proximity.domain.models.poi_marker import POIMarker
from placy_proximity.domain.models.station_request import StationRequest
from placy_proximity.domain.models.travel_mode import TravelMode

logger = logging.getLogger(__name__)

# Attribute carrying the external station ID for each integration
STATION_ID_ATTRIBUTES: dict[IntegrationKind, str] = {
    IntegrationKind.BUS: "data-entur-stopplace-id",
    IntegrationKind.BIKE: "data-bysykkel-station-id",
    IntegrationKind.CAR: "data-hyre-station-id",
}

ESTIMATE_ATTRIBUTES: dict[TravelMode, str] = {
    TravelMode.WALK: "data-walk-time",
    TravelMode.BIKE: "data-bike-time",
    TravelMode.DRIVE: "data-drive-time",
}


def _coordinate_from_pair(lat: Any, lng: Any) -> Coordinate | None:
    """Build a coordinate if both values are finite numbers."""
    try:
        latitude = float(lat)
        longitude = float(lng)
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return None
    return Coordinate(latitude=latitude, longitude=longitude)


def parse_coordinates(raw: str | None) -> Coordinate | None:
    """Parse a `[lat, lng]` JSON array or `{"lat": .., "lng": ..}` object.

    Returns None when the attribute is missing or unusable.
    """
    if not raw:
        return None

    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Failed to parse coordinates: {raw!r}")
        return None

    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) >= 2:
        return _coordinate_from_pair(value[0], value[1])
    if isinstance(value, Mapping) and "lat" in value and "lng" in value:
        return _coordinate_from_pair(value["lat"], value["lng"])

    logger.warning(f"Unsupported coordinate format: {raw!r}")
    return None


def resolve_origin(
    start_location: Sequence[float] | None = None,
    project_coords_attr: str | None = None,
) -> Coordinate | None:
    """Resolve the property coordinate for a page.

    Args:
        start_location: Map config start location in `[lng, lat]` order.
        project_coords_attr: Value of the page's `data-project-coords` attribute.

    Returns:
        The first source that resolves, or None.
    """
    if start_location is not None and len(start_location) >= 2:
        origin = _coordinate_from_pair(start_location[1], start_location[0])
        if origin is not None:
            return origin

    origin = parse_coordinates(project_coords_attr)
    if origin is not None:
        return origin

    logger.warning("No project coordinates available")
    return None


def _parse_estimates(dataset: Mapping[str, str]) -> dict[TravelMode, int]:
    """Read precomputed travel minutes, ignoring attributes that are not integers."""
    estimates: dict[TravelMode, int] = {}
    for mode, attribute in ESTIMATE_ATTRIBUTES.items():
        raw = dataset.get(attribute)
        if raw is None or raw == "":
            continue
        try:
            estimates[mode] = int(raw)
        except ValueError:
            logger.debug(f"Ignoring non-integer {attribute}: {raw!r}")
    return estimates


def marker_from_dataset(dataset: Mapping[str, str], fallback_id: str = "") -> POIMarker | None:
    """Build a POI marker from a card's attributes, or None if it has no coordinates."""
    coordinate = parse_coordinates(dataset.get("data-poi-coords"))
    if coordinate is None:
        return None
    return POIMarker(
        id=dataset.get("data-poi-id") or fallback_id,
        coordinate=coordinate,
        estimates=_parse_estimates(dataset),
    )


def station_request_from_dataset(
    kind: IntegrationKind, dataset: Mapping[str, str]
) -> StationRequest | None:
    """Build the availability request for a station row, or None without a station ID."""
    station_id = dataset.get(STATION_ID_ATTRIBUTES[kind])
    if not station_id:
        return None

    if kind is IntegrationKind.BUS:
        return StationRequest(
            station_id=station_id,
            kind=kind,
            secondary_id=dataset.get("data-entur-quay-id") or None,
            transport_mode=dataset.get("data-entur-transport-mode") or None,
            line_filter=dataset.get("data-entur-line-filter") or None,
        )
    return StationRequest(station_id=station_id, kind=kind)
