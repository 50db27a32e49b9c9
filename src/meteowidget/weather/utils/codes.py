"""WMO weather interpretation codes mapped to emoji icons and descriptions."""

from __future__ import annotations

from typing import ClassVar, Final

DEFAULT_ICON: Final = "🌤️"
UNKNOWN_DESCRIPTION: Final = "Неизвестная погода"


class WeatherCodes:
    """Lookup tables for WMO weather codes.

    Both lookups are total: codes outside the table fall back to a default
    icon and an "unknown weather" description.
    """

    # code group -> icon
    _icon_groups: ClassVar[tuple[tuple[frozenset[int], str], ...]] = (
        (frozenset({0}), "☀️"),  # clear sky
        (frozenset({1, 2}), "⛅"),  # mainly clear, partly cloudy
        (frozenset({3}), "☁️"),  # overcast
        (frozenset({45, 48}), "🌫️"),  # fog
        (frozenset({51, 53, 55}), "🌧️"),  # drizzle
        (frozenset({61, 63, 65}), "🌧️"),  # rain
        (frozenset({71, 73, 75, 77}), "❄️"),  # snow, snow grains
        (frozenset({80, 81, 82}), "🌧️"),  # rain showers
        (frozenset({85, 86}), "🌨️"),  # snow showers
        (frozenset({95, 96, 99}), "⛈️"),  # thunderstorm
    )

    _icon_map: ClassVar[dict[int, str]] = {
        code: icon for codes, icon in _icon_groups for code in codes
    }

    _descriptions: ClassVar[dict[int, str]] = {
        0: "Ясно",
        1: "Преимущественно ясно",
        2: "Частично облачно",
        3: "Облачно",
        45: "Туман",
        48: "Иней",
        51: "Легкая морось",
        53: "Морось",
        55: "Сильная морось",
        61: "Небольшой дождь",
        63: "Дождь",
        65: "Сильный дождь",
        71: "Небольшой снег",
        73: "Снег",
        75: "Сильный снег",
        77: "Снежная крупа",
        80: "Небольшие дождевые ливни",
        81: "Дождевые ливни",
        82: "Сильные дождевые ливни",
        85: "Небольшие ливни со снегом",
        86: "Ливни со снегом",
        95: "Грозовой дождь",
        96: "Грозовой дождь с градом",
        99: "Грозовой дождь с сильным градом",
    }

    @classmethod
    def icon_for(cls, code: int) -> str:
        """Get the emoji icon for a WMO weather code.

        Args:
            code: WMO weather code

        Returns:
            Icon glyph, or the partly-sunny default for unknown codes
        """
        return cls._icon_map.get(code, DEFAULT_ICON)

    @classmethod
    def description_for(cls, code: int) -> str:
        """Get the human-readable description for a WMO weather code.

        Args:
            code: WMO weather code

        Returns:
            Description, or "unknown weather" for unknown codes
        """
        return cls._descriptions.get(code, UNKNOWN_DESCRIPTION)

    @classmethod
    def known_codes(cls) -> frozenset[int]:
        """All codes that have a dedicated icon and description."""
        return frozenset(cls._descriptions)
