"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from placy_proximity.domain.models.coordinate import Coordinate
from placy_proximity.domain.models.travel_mode import TravelMode


def _check_timezone(name: str) -> str:
    """Return the name if it is a known IANA timezone, raise ValueError otherwise."""
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"timezone must be a valid IANA timezone name: {name}") from e
    return name


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Placy REST API configuration
    api_base_url: str = Field(
        default="http://localhost/wp-json/placy/v1",
        description="Base URL of the Placy REST namespace (without trailing slash)",
    )
    request_timeout_seconds: int = Field(
        default=10, description="Timeout for live availability requests in seconds"
    )
    bus_max_departures: int = Field(
        default=5, description="Maximum number of upcoming departures shown per bus stop"
    )
    availability_cache_ttl_seconds: int | None = Field(
        default=None,
        description="Expire cached bike/car availability after this many seconds "
        "(unset keeps it for the whole session)",
    )

    # Travel mode configuration
    default_travel_mode: TravelMode = Field(
        default=TravelMode.WALK, description="Travel mode selected when a page loads"
    )
    timezone: str = Field(
        default="Europe/Oslo",
        description="Timezone for absolute departure times (IANA timezone name)",
    )

    # Optional TOML file with the page origin and overrides
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [origin], [api] and [travel] sections",
    )

    @field_validator("default_travel_mode", mode="before")
    @classmethod
    def validate_default_travel_mode(cls, v: Any) -> Any:
        """Validate the default mode is one of walk, bike or drive."""
        if isinstance(v, str) and v.lower() not in {m.value for m in TravelMode}:
            raise ValueError("default_travel_mode must be one of 'walk', 'bike' or 'drive'")
        return v.lower() if isinstance(v, str) else v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        return _check_timezone(v)

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths can be appended."""
        return v.rstrip("/")

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load page settings")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def load_overrides(self) -> None:
        """Apply the [api] and [travel] sections of the TOML file to these settings."""
        toml_data = self._load_toml_data()

        api_config = toml_data.get("api", {})
        if "base_url" in api_config:
            self.api_base_url = str(api_config["base_url"]).rstrip("/")
        if "request_timeout_seconds" in api_config:
            self.request_timeout_seconds = api_config["request_timeout_seconds"]
        if "bus_max_departures" in api_config:
            self.bus_max_departures = api_config["bus_max_departures"]
        if "availability_cache_ttl_seconds" in api_config:
            self.availability_cache_ttl_seconds = api_config["availability_cache_ttl_seconds"]

        travel_config = toml_data.get("travel", {})
        if "default_mode" in travel_config:
            self.default_travel_mode = TravelMode(str(travel_config["default_mode"]).lower())
        if "timezone" in travel_config:
            self.timezone = _check_timezone(str(travel_config["timezone"]))

    def get_origin(self) -> Coordinate | None:
        """Parse the [origin] section of the TOML file into the property coordinate.

        Returns None if the file has no origin. Raises ValueError if the section is incomplete.
        """
        toml_data = self._load_toml_data()

        origin = toml_data.get("origin")
        if origin is None:
            return None
        if not isinstance(origin, dict) or "lat" not in origin or "lng" not in origin:
            raise ValueError("TOML config 'origin' must have 'lat' and 'lng'")
        return Coordinate(latitude=float(origin["lat"]), longitude=float(origin["lng"]))
