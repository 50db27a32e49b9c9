from collections.abc import Callable
from unittest.mock import Mock, patch

import pytest
import requests

from meteowidget.weather.errors import (
    EmptyInputError,
    ErrorKind,
    NetworkError,
    NotFoundError,
    ParseError,
)
from meteowidget.weather.geocoding import GEOCODING_URL, GeocodingClient
from meteowidget.weather.models import ResolvedLocation

PARIS = {"name": "Paris", "country": "France", "latitude": 48.85, "longitude": 2.35}


@pytest.fixture
def client() -> GeocodingClient:
    return GeocodingClient()


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_resolve_empty_input_makes_no_request(client: GeocodingClient, name: str) -> None:
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        with pytest.raises(EmptyInputError):
            client.resolve(name)
        mock_get.assert_not_called()


def test_resolve_returns_first_result(
    client: GeocodingClient, make_response: Callable[..., Mock]
) -> None:
    other = {"name": "Paris", "country": "United States", "latitude": 33.66, "longitude": -95.55}
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = make_response(payload={"results": [PARIS, other]})
        result = client.resolve("Paris")

    assert result == ResolvedLocation(
        name="Paris", country="France", latitude=48.85, longitude=2.35
    )


def test_resolve_request_shape(client: GeocodingClient, make_response: Callable[..., Mock]) -> None:
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = make_response(payload={"results": [PARIS]})
        client.resolve("  New Delhi ")

    args, kwargs = mock_get.call_args
    assert args[0] == GEOCODING_URL
    assert kwargs["params"] == {
        "name": "New Delhi",
        "count": 1,
        "language": "ru",
        "format": "json",
    }
    assert kwargs["timeout"] == 10


@pytest.mark.parametrize("payload", [{"results": []}, {}, {"generationtime_ms": 0.5}])
def test_resolve_no_results(
    client: GeocodingClient, make_response: Callable[..., Mock], payload: dict[str, object]
) -> None:
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = make_response(payload=payload)
        with pytest.raises(NotFoundError):
            client.resolve("Atlantis")


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_resolve_non_success_status_is_not_found(
    client: GeocodingClient, make_response: Callable[..., Mock], status: int
) -> None:
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = make_response(status, {"error": True, "reason": "x"})
        with pytest.raises(NotFoundError) as excinfo:
            client.resolve("Paris")

    assert excinfo.value.status_code == status


def test_resolve_network_error(client: GeocodingClient) -> None:
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("no route to host")
        with pytest.raises(NetworkError) as excinfo:
            client.resolve("Paris")

    assert isinstance(excinfo.value.original_error, requests.ConnectionError)


def test_resolve_invalid_json(client: GeocodingClient, make_response: Callable[..., Mock]) -> None:
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = make_response(payload=ValueError("Expecting value"))
        with pytest.raises(ParseError) as excinfo:
            client.resolve("Paris")

    assert excinfo.value.kind is ErrorKind.NETWORK_FAILURE


def test_resolve_missing_country_defaults_to_blank(
    client: GeocodingClient, make_response: Callable[..., Mock]
) -> None:
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = make_response(
            payload={"results": [{"name": "McMurdo", "latitude": -77.85, "longitude": 166.67}]}
        )
        result = client.resolve("McMurdo")

    assert result.country == ""


def test_custom_language_and_timeout(make_response: Callable[..., Mock]) -> None:
    client = GeocodingClient("http://geo.test/v1/search", language="en", timeout=3)
    with patch("meteowidget.weather.geocoding.requests.get") as mock_get:
        mock_get.return_value = make_response(payload={"results": [PARIS]})
        client.resolve("Paris")

    args, kwargs = mock_get.call_args
    assert args[0] == "http://geo.test/v1/search"
    assert kwargs["params"]["language"] == "en"
    assert kwargs["timeout"] == 3
