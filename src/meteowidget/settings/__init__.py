"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
- HomeLocation: Fixed coordinates standing in for geolocation
"""

from meteowidget.settings.user import HomeLocation, UserSettings

__all__ = ["HomeLocation", "UserSettings"]
