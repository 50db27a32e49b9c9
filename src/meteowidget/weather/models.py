"""Typed models for lookup queries and Open-Meteo responses.

Only the fields the widget displays are modelled.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────── queries ─────────────────────────────────────────

DEFAULT_LOCATION_LABEL = "Ваше местоположение"
DEFAULT_LOCATION_COUNTRY = "Определяется..."


class ByName(BaseModel):
    """Free-text place name typed by the user."""

    model_config = ConfigDict(frozen=True)

    name: str


class ByCountryAlias(BaseModel):
    """Country picked from the quick-select buttons."""

    model_config = ConfigDict(frozen=True)

    country: str


class ByCoordinates(BaseModel):
    """Raw coordinates, e.g. from geolocation.

    Geocoding is skipped for this query, so the display name and country
    are supplied by the caller.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    name: str = DEFAULT_LOCATION_LABEL
    country: str = DEFAULT_LOCATION_COUNTRY


PlaceQuery = Union[ByName, ByCountryAlias, ByCoordinates]

# ─────────────────────────── results ─────────────────────────────────────────


class ResolvedLocation(BaseModel):
    """Canonical location returned by the geocoder."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    country: str = ""
    latitude: float
    longitude: float


class CurrentConditions(BaseModel):
    """Current-conditions block of the forecast response.

    Values are kept exactly as the API returns them; rounding happens
    at render time.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    temperature_c: float = Field(..., alias="temperature_2m")
    apparent_temperature_c: float = Field(..., alias="apparent_temperature")
    humidity_pct: int = Field(..., alias="relative_humidity_2m")
    precipitation_mm: float = Field(..., alias="precipitation")
    wind_speed_kmh: float = Field(..., alias="wind_speed_10m")
    pressure_hpa: float = Field(..., alias="pressure_msl")
    visibility_m: float = Field(..., alias="visibility")
    weather_code: int = Field(..., alias="weather_code")


class WeatherResult(BaseModel):
    """Everything the presenter needs to draw a weather card."""

    model_config = ConfigDict(frozen=True)

    location: ResolvedLocation
    conditions: CurrentConditions
