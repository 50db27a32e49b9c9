"""Sources of the user's position."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class GeolocationUnavailable(Exception):
    """Raised when the position is unknown, unsupported or denied."""


@runtime_checkable
class GeolocationProvider(Protocol):
    """Protocol for anything that can report the user's coordinates."""

    def locate(self) -> tuple[float, float]:
        """Return (latitude, longitude).

        Raises:
            GeolocationUnavailable: When no position can be provided
        """
        ...


class FixedGeolocation:
    """Reports a preconfigured position."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude

    def locate(self) -> tuple[float, float]:
        return self.latitude, self.longitude


class NoGeolocation:
    """Geolocation that is never available."""

    def __init__(self, reason: str = "Geolocation is not supported") -> None:
        self.reason = reason

    def locate(self) -> tuple[float, float]:
        raise GeolocationUnavailable(self.reason)
