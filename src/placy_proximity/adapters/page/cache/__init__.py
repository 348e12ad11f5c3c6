"""Caches for live availability."""

from placy_proximity.adapters.page.cache.availability_cache import AvailabilityCache

__all__ = ["AvailabilityCache"]
