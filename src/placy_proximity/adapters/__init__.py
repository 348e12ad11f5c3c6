"""Adapters layer - external system integrations."""

from placy_proximity.adapters.config import AppConfig
from placy_proximity.adapters.placy_api import PlacyAvailabilityRepository

__all__ = ["AppConfig", "PlacyAvailabilityRepository"]
