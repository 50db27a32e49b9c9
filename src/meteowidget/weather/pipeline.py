"""Lookup pipeline: place query -> location -> current conditions."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .capitals import COUNTRY_CAPITALS, capital_for
from .forecast import ForecastClient
from .geocoding import GeocodingClient
from .models import (
    ByCoordinates,
    ByCountryAlias,
    ByName,
    PlaceQuery,
    ResolvedLocation,
    WeatherResult,
)

logger = logging.getLogger(__name__)


class WeatherLookup:
    """Orchestrates geocoding and forecast lookups.

    The two requests of a name lookup run strictly in sequence, since the
    forecast needs the geocoded coordinates. The first failure aborts the
    lookup and its exception reaches the caller unchanged.
    """

    def __init__(
        self,
        geocoder: Optional[GeocodingClient] = None,
        forecaster: Optional[ForecastClient] = None,
        capitals: Mapping[str, str] = COUNTRY_CAPITALS,
    ) -> None:
        self.geocoder = geocoder or GeocodingClient()
        self.forecaster = forecaster or ForecastClient()
        self.capitals = capitals

    def normalize(self, query: PlaceQuery) -> ByName | ByCoordinates:
        """Rewrite a country alias into a lookup of its capital."""
        if isinstance(query, ByCountryAlias):
            city = capital_for(query.country, self.capitals)
            logger.debug("Country alias %r -> %r", query.country, city)
            return ByName(name=city)
        return query

    def locate(self, query: ByName | ByCoordinates) -> ResolvedLocation:
        """Resolve a normalized query to a location, geocoding names only."""
        if isinstance(query, ByCoordinates):
            return ResolvedLocation(
                name=query.name,
                country=query.country,
                latitude=query.latitude,
                longitude=query.longitude,
            )
        return self.geocoder.resolve(query.name)

    def lookup(self, query: PlaceQuery) -> WeatherResult:
        """Look up the current weather for a place query.

        Args:
            query: Name, country alias or coordinates

        Returns:
            Location and current conditions

        Raises:
            WeatherLookupError: Whatever the geocoder or forecaster raised
        """
        location = self.locate(self.normalize(query))
        conditions = self.forecaster.fetch_current(location.latitude, location.longitude)
        logger.info(
            "Weather for %s, %s: %s°C, code %s",
            location.name,
            location.country,
            conditions.temperature_c,
            conditions.weather_code,
        )
        return WeatherResult(location=location, conditions=conditions)
