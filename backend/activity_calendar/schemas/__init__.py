from .calendar_entry import CalendarEntryRead
from .participant import ErrorRead, ImageAssetRead

__all__ = [
    "CalendarEntryRead",
    "ErrorRead",
    "ImageAssetRead",
]
