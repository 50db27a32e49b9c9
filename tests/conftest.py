from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest

from meteowidget.weather.models import CurrentConditions, ResolvedLocation, WeatherResult


def _make_response(status_code: int = 200, payload: Any = None, text: str = "") -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    return _make_response


@pytest.fixture
def current_block() -> dict[str, Any]:
    return {
        "time": "2025-05-03T14:00",
        "interval": 900,
        "temperature_2m": 18.0,
        "relative_humidity_2m": 55,
        "apparent_temperature": 16.5,
        "precipitation": 0.0,
        "weather_code": 1,
        "wind_speed_10m": 12.6,
        "pressure_msl": 1013.4,
        "visibility": 24140.0,
    }


@pytest.fixture
def berlin() -> ResolvedLocation:
    return ResolvedLocation(name="Berlin", country="Germany", latitude=52.52, longitude=13.40)


@pytest.fixture
def weather_result(berlin: ResolvedLocation, current_block: dict[str, Any]) -> WeatherResult:
    return WeatherResult(
        location=berlin, conditions=CurrentConditions.model_validate(current_block)
    )
