"""Exception classes for weather lookups.

Every failure of a lookup is one of four kinds. Each exception class maps
to exactly one kind and carries the fixed sentence shown to the user,
while the exception message keeps the technical detail for the logs.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional


class ErrorKind(Enum):
    """Kinds of lookup failures."""

    EMPTY_INPUT = "empty_input"
    NOT_FOUND = "not_found"
    UPSTREAM_FAILURE = "upstream_failure"
    NETWORK_FAILURE = "network_failure"


class WeatherLookupError(Exception):
    """Base error for geocoding and forecast lookups.

    Attributes:
        kind: Failure kind
        message: Technical detail (logged, not shown to the user)
        status_code: HTTP status code when the failure came from a response
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UPSTREAM_FAILURE
    user_message: ClassVar[str] = "Ошибка при обработке запроса."

    def __init__(self, message: str = "", status_code: Optional[int] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error detail
            status_code: HTTP status code, if any
        """
        self.message: str = message or self.user_message
        self.status_code: Optional[int] = status_code
        if status_code is None:
            super().__init__(self.message)
        else:
            super().__init__(f"[{status_code}] {self.message}")


class EmptyInputError(WeatherLookupError):
    """Raised when the place name is empty after trimming."""

    kind = ErrorKind.EMPTY_INPUT
    user_message = "Пожалуйста, введите название города или страны"


class NotFoundError(WeatherLookupError):
    """Raised when the geocoder does not know the place."""

    kind = ErrorKind.NOT_FOUND
    user_message = "Город не найден. Пожалуйста, проверьте название."


class UpstreamError(WeatherLookupError):
    """Raised when the forecast service answers with an error."""

    kind = ErrorKind.UPSTREAM_FAILURE
    user_message = "Ошибка при получении данных о погоде."


class NetworkError(WeatherLookupError):
    """Raised when a network issue prevents API communication."""

    kind = ErrorKind.NETWORK_FAILURE
    user_message = "Ошибка подключения. Проверьте интернет."

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class ParseError(NetworkError):
    """Raised when a successful response cannot be parsed."""
