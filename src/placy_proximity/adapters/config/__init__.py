"""Configuration adapters."""

from placy_proximity.adapters.config.app_config import AppConfig
from placy_proximity.adapters.config.logging_config import configure_logging

__all__ = ["AppConfig", "configure_logging"]
