"""Ports (interfaces) for the ports-and-adapters architecture."""

from placy_proximity.domain.ports.availability_repository import AvailabilityRepository

__all__ = ["AvailabilityRepository"]
