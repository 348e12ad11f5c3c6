"""Fetchers for live availability."""

from placy_proximity.adapters.page.fetchers.availability_fetcher import AvailabilityFetcher

__all__ = ["AvailabilityFetcher"]
