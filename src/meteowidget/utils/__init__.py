"""Common utility functions and helpers for the meteowidget package."""

from meteowidget.utils.formatting import (
    format_coordinate,
    format_number,
    format_temperature,
    round_half_up,
)

__all__ = [
    "format_coordinate",
    "format_number",
    "format_temperature",
    "round_half_up",
]
