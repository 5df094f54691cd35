"""
Service layer around the engines: settings, data access, day layout, HTTP API.
"""

from .config import SalonSettings, get_settings
from .repository import SalonRepository, JsonSalonRepository, RecordNotFound
from .layout import DayLayoutService, LayoutBlock

__all__ = [
    "SalonSettings",
    "get_settings",
    "SalonRepository",
    "JsonSalonRepository",
    "RecordNotFound",
    "DayLayoutService",
    "LayoutBlock",
]
