"""In-memory availability cache."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from placy_proximity.domain.contracts.availability_cache import AvailabilityCacheProtocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from placy_proximity.domain.models.availability_snapshot import AvailabilitySnapshot
    from placy_proximity.domain.models.integration_kind import IntegrationKind

logger = logging.getLogger(__name__)


class AvailabilityCache(AvailabilityCacheProtocol):
    """Session cache of availability snapshots keyed by integration kind and station ID."""

    def __init__(
        self,
        ttl_seconds: int | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Expire entries after this many seconds; None keeps them for the session.
            clock: Source of the current time, defaults to UTC now.
        """
        self._cache: dict[tuple[str, str], AvailabilitySnapshot] = {}
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds is not None else None
        self._clock = clock or (lambda: datetime.now(UTC))

    def get(self, kind: IntegrationKind, station_id: str) -> AvailabilitySnapshot | None:
        """Get the cached snapshot for a station, or None if missing or expired."""
        key = (kind.value, station_id)
        snapshot = self._cache.get(key)
        if snapshot is None:
            return None

        if self._ttl is not None and self._clock() - snapshot.fetched_at >= self._ttl:
            logger.debug(f"Cached {kind.value} availability for {station_id} expired")
            del self._cache[key]
            return None
        return snapshot

    def set(self, snapshot: AvailabilitySnapshot) -> None:
        """Store a snapshot under its kind and station ID."""
        self._cache[(snapshot.kind.value, snapshot.station_id)] = snapshot

    def clear(self) -> None:
        """Drop every cached snapshot."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
