from .api import ActivityApiClient, CalendarController
from .render import render_month
from .state import CalendarState

__all__ = [
    "ActivityApiClient",
    "CalendarController",
    "CalendarState",
    "render_month",
]
