from .config import Settings, get_settings, settings
from .exceptions import ActivityCalendarError, InvalidName, IOFailure, NotFound

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "ActivityCalendarError",
    "InvalidName",
    "IOFailure",
    "NotFound",
]
