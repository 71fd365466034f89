"""
Presentation state for the participant calendar.

Holds what the UI shows (participants, the selected participant, calendar
entries and the open gallery) and changes only through the named transitions
below. Image fetches carry the generation number handed out by
``select_participant``; a response from an older generation is dropped so a
slow fetch can never overwrite the entries of a participant chosen later.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Tuple

from activity_calendar.entries import CalendarEntry, group_images
from activity_calendar.entries.aggregation import ImageLike
from activity_calendar.entries.dates import Clock


@dataclass
class CalendarState:
    base_url: str = ""
    participants: List[str] = field(default_factory=list)
    active_participant: Optional[str] = None
    entries: List[CalendarEntry] = field(default_factory=list)
    gallery: Tuple[str, ...] = ()
    generation: int = 0

    @property
    def gallery_open(self) -> bool:
        return bool(self.gallery)

    @property
    def active_days(self) -> int:
        return len(self.entries)

    def entry_for(self, day: date) -> Optional[CalendarEntry]:
        for entry in self.entries:
            if entry.day == day:
                return entry
        return None

    def participants_loaded(self, names: Iterable[str]) -> None:
        self.participants = list(names)

    def select_participant(self, name: str) -> int:
        """Make ``name`` active and return the generation its fetch must carry."""
        self.active_participant = name
        self.generation += 1
        self.gallery = ()
        return self.generation

    def receive_images(
        self,
        generation: int,
        images: Iterable[ImageLike],
        *,
        today: Clock = None,
    ) -> bool:
        """Replace the entries with ``images`` unless the fetch is stale."""
        if generation != self.generation or self.active_participant is None:
            return False
        self.entries = group_images(
            self.active_participant,
            images,
            base_url=self.base_url,
            today=today,
        )
        return True

    def open_entry(self, entry: CalendarEntry) -> None:
        self.gallery = tuple(entry.images)

    def close_gallery(self) -> None:
        self.gallery = ()
