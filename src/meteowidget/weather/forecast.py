"""Current-conditions client for the Open-Meteo forecast API."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests
from pydantic import ValidationError

from .errors import NetworkError, ParseError, UpstreamError
from .models import CurrentConditions

logger = logging.getLogger(__name__)

FORECAST_URL: Final = "https://api.open-meteo.com/v1/forecast"

# Fields requested in the `current` block, in request order
CURRENT_FIELDS: Final = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "pressure_msl",
    "visibility",
)


class ForecastClient:
    """Fetches the current weather for a pair of coordinates."""

    def __init__(self, url: str = FORECAST_URL, timeout: int = 10) -> None:
        """Initialize the forecast client.

        Args:
            url: Forecast endpoint
            timeout: Timeout for API requests in seconds
        """
        self.url = url
        self.timeout = timeout

    def fetch_current(self, latitude: float, longitude: float) -> CurrentConditions:
        """Retrieve current conditions.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            Current conditions, unconverted

        Raises:
            NetworkError: When the service cannot be reached
            UpstreamError: On a non-2xx status
            ParseError: When the body lacks the current-conditions block
        """
        params: dict[str, Any] = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "timezone": "auto",
        }

        logger.debug("Fetching current weather for %s, %s", latitude, longitude)
        try:
            resp = requests.get(self.url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Forecast network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if not 200 <= resp.status_code < 300:
            try:
                msg = resp.json().get("reason", resp.text)
            except (ValueError, AttributeError):
                msg = resp.text
            logger.error("Forecast API error: %s - %s", resp.status_code, msg)
            raise UpstreamError(str(msg), resp.status_code)

        try:
            current = resp.json()["current"]
            return CurrentConditions.model_validate(current)
        except (ValidationError, ValueError, KeyError, TypeError) as exc:
            logger.error("Could not parse forecast response: %s", exc)
            raise ParseError("Invalid forecast response", exc) from exc
