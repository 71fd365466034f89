"""Grouping of a participant's images into one calendar entry per day."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Mapping, Optional, Union

from activity_calendar.entries.dates import Clock, extract_date
from activity_calendar.schemas import ImageAssetRead

ImageLike = Union[ImageAssetRead, Mapping[str, str]]


@dataclass(slots=True)
class CalendarEntry:
    """All images of one participant that share a calendar day."""

    id: str
    title: str
    start: date
    end: date
    all_day: bool = True
    images: List[str] = field(default_factory=list)

    @property
    def day(self) -> date:
        return self.start

    @property
    def image_count(self) -> int:
        return len(self.images)


def entry_title(participant: str) -> str:
    return f"{participant} activity"


def _fields(image: ImageLike) -> tuple[str, str]:
    if isinstance(image, ImageAssetRead):
        return image.filename, image.url
    return image["filename"], image["url"]


def group_images(
    participant: str,
    images: Iterable[ImageLike],
    *,
    base_url: str = "",
    today: Clock = None,
) -> List[CalendarEntry]:
    """Collapse ``images`` into entries keyed by the date in each filename.

    Entries come back in the order their first image was seen; image URLs keep
    the listing order and are prefixed with ``base_url`` (trailing slash
    trimmed) so a client can load them directly.
    """
    prefix = base_url.rstrip("/")
    grouped: dict[str, CalendarEntry] = {}
    for image in images:
        filename, url = _fields(image)
        day = extract_date(filename, today=today)
        key = day.isoformat()
        entry = grouped.get(key)
        if entry is None:
            entry = CalendarEntry(
                id=f"{participant}-{key}",
                title=entry_title(participant),
                start=day,
                end=day,
            )
            grouped[key] = entry
        entry.images.append(f"{prefix}{url}")
    return list(grouped.values())


def filter_entries(
    entries: Iterable[CalendarEntry],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[CalendarEntry]:
    """Keep entries whose day lies within ``start``..``end`` (both inclusive)."""
    result = []
    for entry in entries:
        if start and entry.day < start:
            continue
        if end and entry.day > end:
            continue
        result.append(entry)
    return result
