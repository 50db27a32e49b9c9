"""Weather package - holds API clients, the lookup pipeline, and custom errors."""

from .capitals import COUNTRY_CAPITALS, QUICK_SELECT, capital_for
from .errors import (
    EmptyInputError,
    ErrorKind,
    NetworkError,
    NotFoundError,
    ParseError,
    UpstreamError,
    WeatherLookupError,
)
from .forecast import ForecastClient
from .geocoding import GeocodingClient
from .models import (
    ByCoordinates,
    ByCountryAlias,
    ByName,
    CurrentConditions,
    PlaceQuery,
    ResolvedLocation,
    WeatherResult,
)
from .pipeline import WeatherLookup
from .utils import WeatherCodes

# Define what gets imported with: from meteowidget.weather import *
__all__ = [
    "COUNTRY_CAPITALS",
    "QUICK_SELECT",
    "ByCoordinates",
    "ByCountryAlias",
    "ByName",
    "CurrentConditions",
    "EmptyInputError",
    "ErrorKind",
    "ForecastClient",
    "GeocodingClient",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "PlaceQuery",
    "ResolvedLocation",
    "UpstreamError",
    "WeatherCodes",
    "WeatherLookup",
    "WeatherLookupError",
    "WeatherResult",
    "capital_for",
]
