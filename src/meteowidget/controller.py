# filepath: src/meteowidget/controller.py
"""Core controller for the weather widget."""

from __future__ import annotations

import logging
from typing import Final

from pydantic import ValidationError

from meteowidget.display.protocols import Presenter
from meteowidget.geolocation import (
    FixedGeolocation,
    GeolocationProvider,
    GeolocationUnavailable,
    NoGeolocation,
)
from meteowidget.settings.user import UserSettings
from meteowidget.weather.capitals import COUNTRY_CAPITALS
from meteowidget.weather.errors import (
    EmptyInputError,
    WeatherLookupError,
)
from meteowidget.weather.forecast import ForecastClient
from meteowidget.weather.geocoding import GeocodingClient
from meteowidget.weather.models import (
    ByCoordinates,
    ByCountryAlias,
    ByName,
    PlaceQuery,
    WeatherResult,
)
from meteowidget.weather.pipeline import WeatherLookup

logger: Final = logging.getLogger(__name__)


class WeatherWidget:
    """Main controller class for the weather widget.

    Connects the page's triggers to the lookup pipeline:
    - the search box (button click or Enter)
    - the country quick-select buttons
    - page load, which tries geolocation and falls back to a default city

    Each trigger runs one lookup and hands the outcome to the presenter.
    Lookups are not serialized; when several overlap, whichever finishes
    last is what the presenter shows.
    """

    def __init__(
        self,
        presenter: Presenter,
        settings: UserSettings | None = None,
        lookup: WeatherLookup | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the widget controller.

        Args:
            presenter: Sink for loading, result and error updates
            settings: Preloaded settings (loaded from the default locations if None)
            lookup: Optional custom lookup pipeline
            debug: Enable debug logging
        """
        # Configure logging
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.settings: UserSettings = settings or UserSettings.load()
        self.presenter = presenter

        # Allow dependency injection or create defaults
        self.lookup = lookup or WeatherLookup(
            GeocodingClient(
                self.settings.geocoding_url,
                language=self.settings.language,
                timeout=self.settings.timeout,
            ),
            ForecastClient(self.settings.forecast_url, timeout=self.settings.timeout),
            COUNTRY_CAPITALS,
        )

    def default_geolocation(self) -> GeolocationProvider:
        """Geolocation derived from settings: the home position, if configured."""
        home = self.settings.home
        if home is None:
            return NoGeolocation()
        return FixedGeolocation(home.lat, home.lon)

    def search(self, text: str) -> WeatherResult | None:
        """Handle the search box.

        Blank input is rejected before anything is shown as loading.

        Args:
            text: Contents of the search box

        Returns:
            The weather result, or None if the lookup failed
        """
        if not text.strip():
            self.presenter.show_error(EmptyInputError("Empty search box"))
            return None
        return self.run(ByName(name=text.strip()))

    def select_country(self, country: str) -> WeatherResult | None:
        """Handle a quick-select button."""
        return self.run(ByCountryAlias(country=country))

    def show_coordinates(
        self,
        latitude: float,
        longitude: float,
        name: str | None = None,
        country: str | None = None,
    ) -> WeatherResult | None:
        """Show the weather at raw coordinates under placeholder labels."""
        return self.run(self._coordinates_query(latitude, longitude, name, country))

    def _coordinates_query(
        self,
        latitude: float,
        longitude: float,
        name: str | None = None,
        country: str | None = None,
    ) -> ByCoordinates:
        return ByCoordinates(
            latitude=latitude,
            longitude=longitude,
            name=name if name is not None else self.settings.location_label,
            country=country if country is not None else self.settings.location_country,
        )

    def on_load(self, geolocation: GeolocationProvider | None = None) -> WeatherResult | None:
        """Handle page load.

        Shows the weather at the user's position, or for the default city
        when the position is unavailable or out of range. A geolocation
        failure is never reported as an error.

        Args:
            geolocation: Position source (default: from settings)

        Returns:
            The weather result, or None if the lookup failed
        """
        provider = geolocation or self.default_geolocation()
        try:
            latitude, longitude = provider.locate()
            query = self._coordinates_query(latitude, longitude)
        except (GeolocationUnavailable, ValidationError) as exc:
            logger.info(
                "Geolocation unavailable (%s), showing %s", exc, self.settings.default_city
            )
            return self.run(ByName(name=self.settings.default_city))
        return self.run(query)

    def run(self, query: PlaceQuery) -> WeatherResult | None:
        """Run one lookup and hand its outcome to the presenter.

        Args:
            query: Place to look up

        Returns:
            The weather result, or None if the lookup failed
        """
        self.presenter.show_loading()
        try:
            result = self.lookup.lookup(query)
        except WeatherLookupError as err:
            logger.error("Lookup failed (%s): %s", err.kind.value, err)
            self.presenter.show_error(err)
            return None
        except Exception as exc:
            logger.exception("Unexpected error while processing %r", query)
            self.presenter.show_error(WeatherLookupError(str(exc)))
            return None

        self.presenter.show_result(result)
        return result
