"""Text and number formatting utilities."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up.

    Unlike the built-in round(), 2.5 becomes 3 and -2.5 becomes -2.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    return math.floor(value + 0.5)


def format_temperature(temp: float, unit: str = "°C") -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit

    Returns:
        Formatted temperature string
    """
    return f"{round_half_up(temp)}{unit}"


def format_number(value: float) -> str:
    """Format a measured value without a trailing ".0"."""
    return str(int(value)) if float(value).is_integer() else str(value)


def format_coordinate(value: float) -> str:
    """Format a coordinate in degrees with two decimals."""
    return f"{value:.2f}°"
