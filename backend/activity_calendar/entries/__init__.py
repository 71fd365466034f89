from .aggregation import CalendarEntry, entry_title, filter_entries, group_images
from .dates import extract_date, find_date_digits

__all__ = [
    "CalendarEntry",
    "entry_title",
    "extract_date",
    "filter_entries",
    "find_date_digits",
    "group_images",
]
