"""Errors raised by the listing service and mapped to HTTP responses in main.py."""

from __future__ import annotations

from fastapi import status


class ActivityCalendarError(Exception):
    """Base class for errors that cross the API boundary as ``{"error": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, participant: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.participant = participant


class IOFailure(ActivityCalendarError):
    """The storage root or a participant folder could not be read."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NotFound(ActivityCalendarError):
    """The requested asset does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidName(ActivityCalendarError):
    """A participant or file name would escape the storage root."""

    status_code = status.HTTP_400_BAD_REQUEST
