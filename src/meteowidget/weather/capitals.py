"""Quick-select country aliases resolved to their capital cities."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

COUNTRY_CAPITALS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "Russia": "Moscow",
        "USA": "Washington",
        "China": "Beijing",
        "Japan": "Tokyo",
        "Germany": "Berlin",
        "France": "Paris",
        "Canada": "Ottawa",
        "Australia": "Canberra",
        "India": "New Delhi",
        "Brazil": "Brasília",
    }
)

# Order of the quick-select buttons on the page
QUICK_SELECT: Final[tuple[str, ...]] = tuple(COUNTRY_CAPITALS)


def capital_for(alias: str, capitals: Mapping[str, str] = COUNTRY_CAPITALS) -> str:
    """Return the capital for a country alias, or the alias itself if unknown."""
    return capitals.get(alias, alias)
