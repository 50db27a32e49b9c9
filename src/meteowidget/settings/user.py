"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from meteowidget.weather.forecast import FORECAST_URL
from meteowidget.weather.geocoding import GEOCODING_URL
from meteowidget.weather.models import DEFAULT_LOCATION_COUNTRY, DEFAULT_LOCATION_LABEL

# Load environment variables from .env file(s)
load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "METEOWIDGET_CONFIG"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class HomeLocation(BaseModel):
    """Fixed coordinates reported as the user's position."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")


class UserSettings(BaseModel):
    """User settings for the widget.

    Every field has a default, so the widget also runs without a config file.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/meteowidget/config.yaml").expanduser(),
        Path("/etc/meteowidget/config.yaml"),
    ]

    # Services
    geocoding_url: str = Field(GEOCODING_URL, description="Geocoding search endpoint")
    forecast_url: str = Field(FORECAST_URL, description="Forecast endpoint")
    language: str = Field("ru", min_length=2, description="Language of place names")
    timeout: int = Field(10, gt=0, description="HTTP timeout (seconds)")

    # Page behaviour
    default_city: str = Field(
        "Moscow",
        min_length=1,
        description="City shown on load when geolocation is unavailable",
    )
    location_label: str = Field(
        DEFAULT_LOCATION_LABEL, description="Display name for geolocated weather"
    )
    location_country: str = Field(
        DEFAULT_LOCATION_COUNTRY, description="Country line for geolocated weather"
    )
    home: HomeLocation | None = Field(
        None, description="Coordinates used in place of browser geolocation"
    )
    output_html: Path = Field(Path("weather.html"), description="Rendered page path")

    @classmethod
    def find_config(cls, path: Path | None = None) -> Path | None:
        """Locate the config file to use.

        Args:
            path: Explicit path, wins over everything else

        Returns:
            Path of the config file, or None when no file exists

        Raises:
            FileNotFoundError: If an explicitly requested file is missing
        """
        if path is not None:
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {path}")
            return path

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object; defaults when no file is found

        Raises:
            FileNotFoundError: If a requested config file does not exist
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        config_path = cls.find_config(path)
        if config_path is None:
            logger.debug("No config file found, using defaults")
            return cls()

        try:
            content = _interpolate_env(config_path.read_text(encoding="utf-8"))
            data = yaml.safe_load(content) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
