"""Broadcasters for page-wide state."""

from placy_proximity.adapters.page.broadcasters.mode_broadcast_bus import ModeBroadcastBus

__all__ = ["ModeBroadcastBus"]
