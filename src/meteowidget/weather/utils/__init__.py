"""Weather utility classes."""

from meteowidget.weather.utils.codes import WeatherCodes

__all__ = ["WeatherCodes"]
