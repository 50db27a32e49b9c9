"""Weather widget CLI application.

This module provides the command-line interface for the weather widget:
lookups by city, by country quick-select and by coordinates, the
page-load flow with its geolocation fallback, and configuration helpers.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, Optional

import typer
import yaml

from meteowidget.controller import WeatherWidget
from meteowidget.display.presenters import ConsolePresenter, HtmlPresenter
from meteowidget.display.protocols import Presenter
from meteowidget.geolocation import FixedGeolocation
from meteowidget.settings.user import UserSettings
from meteowidget.weather.models import WeatherResult

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Current weather lookup widget", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "meteowidget.cli"

# Options shared by the lookup commands
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
HTML_OPTION = typer.Option(
    None, "--html", help="Render the page to this HTML file instead of the console"
)
PAGE_OPTION = typer.Option(
    False, "--page", help="Render the page to the configured output_html file"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def _build_widget(
    config: Optional[Path], html: Optional[Path], page: bool, debug: bool
) -> tuple[WeatherWidget, Optional[Path]]:
    try:
        settings = UserSettings.load(config)
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    output = html if html is not None else (settings.output_html if page else None)

    presenter: Presenter
    if output is not None:
        presenter = HtmlPresenter(output, language=settings.language)
    else:
        presenter = ConsolePresenter()
    return WeatherWidget(presenter, settings=settings, debug=debug), output


def _finish(result: WeatherResult | None, output: Optional[Path]) -> None:
    if result is None:
        raise typer.Exit(code=1)
    if output is not None:
        typer.echo(f"Page written to {output}")


@app.command()
def search(
    city: list[str] = typer.Argument(..., help="City or country name"),
    config: Optional[Path] = CONFIG_OPTION,
    html: Optional[Path] = HTML_OPTION,
    page: bool = PAGE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the current weather for a place name."""
    widget, output = _build_widget(config, html, page, debug)
    _finish(widget.search(" ".join(city)), output)


@app.command()
def country(
    name: str = typer.Argument(..., help="Country, e.g. Japan"),
    config: Optional[Path] = CONFIG_OPTION,
    html: Optional[Path] = HTML_OPTION,
    page: bool = PAGE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the current weather in a country's capital."""
    widget, output = _build_widget(config, html, page, debug)
    _finish(widget.select_country(name), output)


@app.command()
def coords(
    lat: float = typer.Argument(..., min=-90, max=90, help="Latitude"),
    lon: float = typer.Argument(..., min=-180, max=180, help="Longitude"),
    config: Optional[Path] = CONFIG_OPTION,
    html: Optional[Path] = HTML_OPTION,
    page: bool = PAGE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the current weather at coordinates."""
    widget, output = _build_widget(config, html, page, debug)
    _finish(widget.show_coordinates(lat, lon), output)


@app.command()
def start(
    lat: Optional[float] = typer.Option(None, min=-90, max=90, help="Your latitude"),
    lon: Optional[float] = typer.Option(None, min=-180, max=180, help="Your longitude"),
    config: Optional[Path] = CONFIG_OPTION,
    html: Optional[Path] = HTML_OPTION,
    page: bool = PAGE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the weather the way the page does on load.

    Uses --lat/--lon (or the configured home position) as the user's
    location, and the default city when no position is known.
    """
    if (lat is None) != (lon is None):
        typer.secho("--lat and --lon must be given together", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    widget, output = _build_widget(config, html, page, debug)
    geolocation = FixedGeolocation(lat, lon) if lat is not None and lon is not None else None
    _finish(widget.on_load(geolocation), output)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def show_config(config: Optional[Path] = CONFIG_OPTION):
    """Print the effective settings as YAML."""
    try:
        settings = UserSettings.load(config)
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(
        yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False, allow_unicode=True)
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    main()
