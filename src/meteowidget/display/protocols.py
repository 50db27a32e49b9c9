# src/meteowidget/display/protocols.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from meteowidget.weather.errors import WeatherLookupError
from meteowidget.weather.models import WeatherResult


@runtime_checkable
class Presenter(Protocol):
    """Protocol defining the interface for presentation sinks.

    A lookup first signals loading, then hands over either a result or
    an error. Implementations decide how the page regions change.
    """

    def show_loading(self) -> None:
        """Signal that a lookup has started."""
        ...

    def show_result(self, result: WeatherResult) -> None:
        """Display a weather card.

        Args:
            result: Location and current conditions
        """
        ...

    def show_error(self, error: WeatherLookupError) -> None:
        """Display an error banner and clear the weather region.

        Args:
            error: Failure of the lookup
        """
        ...


class MockPresenter:
    """Mock implementation of Presenter for testing."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def show_loading(self) -> None:
        self.events.append(("loading", None))

    def show_result(self, result: WeatherResult) -> None:
        self.events.append(("result", result))

    def show_error(self, error: WeatherLookupError) -> None:
        self.events.append(("error", error))

    @property
    def kinds(self) -> list[str]:
        """Names of the recorded events, in order."""
        return [kind for kind, _ in self.events]

    @property
    def last(self) -> object:
        """Payload of the most recent event."""
        return self.events[-1][1] if self.events else None
