"""Weather card rendering components."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from meteowidget.utils.formatting import (
    format_coordinate,
    format_number,
    format_temperature,
    round_half_up,
)
from meteowidget.weather.capitals import QUICK_SELECT
from meteowidget.weather.models import WeatherResult
from meteowidget.weather.utils import WeatherCodes

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class CardContextBuilder:
    """Builds template context for a weather card.

    All presentation rounding happens here: temperatures, wind and
    pressure are rounded half-up, visibility is converted to kilometres,
    humidity and precipitation are shown as received.
    """

    def build_card_context(self, result: WeatherResult) -> Dict[str, Any]:
        """Build complete context for the card template.

        Args:
            result: Location and current conditions

        Returns:
            Template context dictionary
        """
        location = result.location
        current = result.conditions

        details = [
            {"icon": "💧", "label": "Влажность", "value": f"{current.humidity_pct}%"},
            {
                "icon": "💨",
                "label": "Ветер",
                "value": f"{round_half_up(current.wind_speed_kmh)} км/ч",
            },
            {
                "icon": "🌡️",
                "label": "Ощущается",
                "value": format_temperature(current.apparent_temperature_c),
            },
            {
                "icon": "🔽",
                "label": "Давление",
                "value": f"{round_half_up(current.pressure_hpa)} мб",
            },
            {
                "icon": "👁️",
                "label": "Видимость",
                "value": f"{round_half_up(current.visibility_m / 1000)} км",
            },
            {
                "icon": "💧",
                "label": "Осадки",
                "value": f"{format_number(current.precipitation_mm)} мм",
            },
        ]

        return {
            "city": location.name,
            "country": location.country,
            "icon": WeatherCodes.icon_for(current.weather_code),
            "description": WeatherCodes.description_for(current.weather_code),
            "temperature": format_temperature(current.temperature_c),
            "details": details,
            "latitude": format_coordinate(location.latitude),
            "longitude": format_coordinate(location.longitude),
        }


class TemplateRenderer:
    """Handles the Jinja2 environment and renders page fragments."""

    def __init__(self, templates_dir: Optional[Path] = None) -> None:
        """Initialize the template renderer.

        Args:
            templates_dir: Directory containing templates (default: packaged ones)
        """
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html", "j2"]),
        )
        self.card_template = self.env.get_template("card.html.j2")
        self.error_template = self.env.get_template("error.html.j2")
        self.loading_template = self.env.get_template("loading.html.j2")
        self.page_template = self.env.get_template("page.html.j2")

    def render_card(self, **context: Any) -> str:
        return self.card_template.render(**context)

    def render_error(self, message: str) -> str:
        return self.error_template.render(message=message)

    def render_loading(self) -> str:
        return self.loading_template.render()

    def render_page(
        self,
        weather_region: str = "",
        error_region: str = "",
        quick_select: Sequence[str] = QUICK_SELECT,
        language: str = "ru",
    ) -> str:
        """Render the full page around two pre-rendered regions.

        Args:
            weather_region: HTML of the weather container
            error_region: HTML of the error region
            quick_select: Country aliases offered as buttons
            language: Page language

        Returns:
            Rendered HTML document
        """
        return self.page_template.render(
            weather_region=weather_region,
            error_region=error_region,
            quick_select=quick_select,
            language=language,
        )
