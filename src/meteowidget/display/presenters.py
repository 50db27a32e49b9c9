"""Presentation sinks that draw lookup results."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Optional

import typer

from meteowidget.display.render import CardContextBuilder, TemplateRenderer
from meteowidget.weather.errors import WeatherLookupError
from meteowidget.weather.models import WeatherResult

logger: Final = logging.getLogger(__name__)


class HtmlPresenter:
    """Keeps the page's weather and error regions and writes the page out.

    Every update rewrites the HTML file, so the file always shows the
    latest state: loading, a weather card, or an error banner with an
    empty weather region.
    """

    def __init__(
        self,
        output_path: Path,
        renderer: Optional[TemplateRenderer] = None,
        context_builder: Optional[CardContextBuilder] = None,
        language: str = "ru",
    ) -> None:
        self.output_path = output_path
        self.renderer = renderer or TemplateRenderer()
        self.context_builder = context_builder or CardContextBuilder()
        self.language = language
        self.weather_region = ""
        self.error_region = ""

    def show_loading(self) -> None:
        self.error_region = ""
        self.weather_region = self.renderer.render_loading()
        self._write()

    def show_result(self, result: WeatherResult) -> None:
        ctx = self.context_builder.build_card_context(result)
        self.error_region = ""
        self.weather_region = self.renderer.render_card(**ctx)
        self._write()

    def show_error(self, error: WeatherLookupError) -> None:
        self.error_region = self.renderer.render_error(error.user_message)
        self.weather_region = ""
        self._write()

    def render(self) -> str:
        """Render the page with the current region contents."""
        return self.renderer.render_page(
            weather_region=self.weather_region,
            error_region=self.error_region,
            language=self.language,
        )

    def _write(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(self.render(), encoding="utf-8")
        logger.debug("Wrote %s", self.output_path)


class ConsolePresenter:
    """Prints weather cards and errors to the terminal."""

    def __init__(self, context_builder: Optional[CardContextBuilder] = None) -> None:
        self.context_builder = context_builder or CardContextBuilder()

    def show_loading(self) -> None:
        typer.echo("⏳ Загрузка данных...", err=True)

    def show_result(self, result: WeatherResult) -> None:
        ctx = self.context_builder.build_card_context(result)
        header = f"{ctx['icon']} {ctx['city']}"
        if ctx["country"]:
            header += f", {ctx['country']}"
        typer.secho(header, bold=True)
        typer.echo(f"{ctx['temperature']}  {ctx['description']}")
        for item in ctx["details"]:
            typer.echo(f"  {item['icon']} {item['label']}: {item['value']}")
        typer.echo(f"Координаты: {ctx['latitude']}, {ctx['longitude']}")

    def show_error(self, error: WeatherLookupError) -> None:
        typer.secho(error.user_message, fg=typer.colors.RED, err=True)
