"""Current weather lookup widget backed by the Open-Meteo APIs."""

__version__ = "0.1.0"
