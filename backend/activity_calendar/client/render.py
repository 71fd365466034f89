from __future__ import annotations

from calendar import Calendar
from typing import Iterable, List, Optional

from activity_calendar.entries import CalendarEntry

WEEKDAY_HEADER = "Mo    Tu    We    Th    Fr    Sa    Su"
CELL_WIDTH = 6


def month_label(year: int, month: int) -> str:
    return f"{year}. {month:02d}"


def _cell(day: int, count: int) -> str:
    if day == 0:
        return " " * CELL_WIDTH
    text = f"{day:2d}" + (f"[{count}]" if count else "")
    return text.ljust(CELL_WIDTH)


def render_month(
    entries: Iterable[CalendarEntry],
    year: int,
    month: int,
    *,
    participant: Optional[str] = None,
) -> str:
    """Render a month grid; days with an entry show their image count, e.g. ``15[3]``."""
    counts = {
        entry.day.day: entry.image_count
        for entry in entries
        if entry.day.year == year and entry.day.month == month
    }
    header = month_label(year, month)
    header += f" · {participant}" if participant else " · select a participant"

    lines: List[str] = [header, WEEKDAY_HEADER]
    for week in Calendar(firstweekday=0).monthdayscalendar(year, month):
        lines.append("".join(_cell(day, counts.get(day, 0)) for day in week).rstrip())
    lines.append(f"{len(counts)} days of activity")
    return "\n".join(lines)
