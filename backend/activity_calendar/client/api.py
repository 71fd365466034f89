"""HTTP client for the activity API and the controller that feeds CalendarState."""
from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import requests

from activity_calendar.client.state import CalendarState
from activity_calendar.core.config import settings
from activity_calendar.entries import CalendarEntry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ActivityApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        # Paths below always start with "/", so keep exactly one separator
        self.base_url = (base_url if base_url is not None else settings.ACTIVITY_API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get_json(self, path: str) -> Any:
        response = self.session.get(f"{self.base_url}{path}", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_participants(self) -> List[str]:
        return self._get_json("/api/participants")

    def fetch_images(self, participant: str) -> List[dict]:
        return self._get_json(f"/api/participants/{quote(participant, safe='')}/images")


class CalendarController:
    """Runs fetches against the API and applies their results to the state.

    Network and HTTP failures are logged and leave the state as it was.
    """

    def __init__(self, client: ActivityApiClient, state: Optional[CalendarState] = None) -> None:
        self.client = client
        self.state = state or CalendarState(base_url=client.base_url)

    def load_participants(self) -> bool:
        try:
            names = self.client.fetch_participants()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Failed to load participants: {e}")
            return False
        self.state.participants_loaded(names)
        return True

    def choose_participant(self, name: str) -> bool:
        generation = self.state.select_participant(name)
        try:
            images = self.client.fetch_images(name)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Failed to load images of {name!r}: {e}")
            return False
        applied = self.state.receive_images(generation, images)
        if not applied:
            logger.debug(f"Discarded stale images of {name!r} (generation {generation})")
        return applied

    def open_entry(self, entry: CalendarEntry) -> None:
        self.state.open_entry(entry)

    def close_gallery(self) -> None:
        self.state.close_gallery()
