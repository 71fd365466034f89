"""Calendar dates derived from image filenames."""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

# KakaoTalk exports are named KakaoTalk_YYYYMMDD_hhmmss...; try that form first
MARKED_DATE_PATTERN = re.compile(r"KakaoTalk_(\d{8})")
DATE_PATTERN = re.compile(r"(\d{8})")

Clock = Union[date, Callable[[], date], None]


def _resolve_today(today: Clock) -> date:
    if today is None:
        return date.today()
    if callable(today):
        return today()
    return today


def find_date_digits(filename: str) -> Optional[str]:
    """Return the first 8-digit run of ``filename``, preferring the marked form."""
    match = MARKED_DATE_PATTERN.search(filename) or DATE_PATTERN.search(filename)
    return match.group(1) if match else None


def extract_date(filename: str, today: Clock = None) -> date:
    """Return the ``YYYYMMDD`` date embedded in ``filename``.

    Falls back to ``today`` (a date, a callable returning one, or the system
    date) when no digits are found or they do not form a valid date. The
    fallback is a heuristic, never an error.
    """
    digits = find_date_digits(filename)
    if digits is not None:
        try:
            return datetime.strptime(digits, "%Y%m%d").date()
        except ValueError:
            logger.debug(f"Digits {digits} in {filename!r} are not a valid date")
    else:
        logger.debug(f"No date found in {filename!r}")
    return _resolve_today(today)
