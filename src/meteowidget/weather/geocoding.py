"""Geocoding client for the Open-Meteo search API."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests
from pydantic import ValidationError

from .errors import EmptyInputError, NetworkError, NotFoundError, ParseError
from .models import ResolvedLocation

logger = logging.getLogger(__name__)

GEOCODING_URL: Final = "https://geocoding-api.open-meteo.com/v1/search"


class GeocodingClient:
    """Resolves a free-text place name to a single location.

    Only the first match is used; the service is asked for one result.
    Any non-2xx status is reported as "not found", since the service
    returns those mainly for malformed queries.
    """

    def __init__(
        self, url: str = GEOCODING_URL, language: str = "ru", timeout: int = 10
    ) -> None:
        """Initialize the geocoding client.

        Args:
            url: Search endpoint
            language: Language of the returned place names
            timeout: Timeout for API requests in seconds
        """
        self.url = url
        self.language = language
        self.timeout = timeout

    def resolve(self, place_name: str) -> ResolvedLocation:
        """Look up coordinates for a place name.

        Args:
            place_name: Human-readable place name, e.g. "Paris"

        Returns:
            The first matching location

        Raises:
            EmptyInputError: When the name is blank (no request is made)
            NetworkError: When the service cannot be reached
            NotFoundError: On a non-2xx status or an empty result list
            ParseError: When a 2xx body is not a valid search response
        """
        name = place_name.strip()
        if not name:
            raise EmptyInputError("Empty place name")

        params: dict[str, Any] = {
            "name": name,
            "count": 1,
            "language": self.language,
            "format": "json",
        }

        logger.debug("Geocoding %r", name)
        try:
            resp = requests.get(self.url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Geocoding network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if not 200 <= resp.status_code < 300:
            logger.info("Geocoding %r failed with status %s", name, resp.status_code)
            raise NotFoundError(f"No place matches {name!r}", resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("Geocoding returned invalid JSON: %s", exc)
            raise ParseError("Invalid geocoding response", exc) from exc

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            logger.info("Geocoding found nothing for %r", name)
            raise NotFoundError(f"No place matches {name!r}")

        try:
            location = ResolvedLocation.model_validate(results[0])
        except ValidationError as exc:
            logger.error("Unexpected geocoding result: %s", exc)
            raise ParseError("Invalid geocoding result", exc) from exc

        logger.debug(
            "Resolved %r to %s, %s (%s, %s)",
            name,
            location.name,
            location.country,
            location.latitude,
            location.longitude,
        )
        return location
