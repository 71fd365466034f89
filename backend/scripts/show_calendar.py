#!/usr/bin/env python3
"""Print the participant list, or one participant's month calendar, from a running API."""
from __future__ import annotations

import argparse
import sys
from datetime import date

from activity_calendar.client import ActivityApiClient, CalendarController, render_month
from activity_calendar.core.config import settings
from activity_calendar.core.logging_config import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    today = date.today()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("participant", nargs="?", help="Participant to show; omit to list participants")
    parser.add_argument("--api-url", default=settings.ACTIVITY_API_URL, help="Base URL of the API")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month, choices=range(1, 13))
    parser.add_argument("--day", help="Show the image URLs of this day (YYYY-MM-DD)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = parse_args(argv)
    controller = CalendarController(ActivityApiClient(args.api_url))

    if not controller.load_participants():
        print("ERROR: Cannot load participants. Is the API running?")
        return 1

    if not args.participant:
        print(f"Participants ({len(controller.state.participants)}):")
        for name in controller.state.participants:
            print(f"  {name}")
        return 0

    if not controller.choose_participant(args.participant):
        print(f"ERROR: Cannot load images of {args.participant}")
        return 1

    state = controller.state
    print(render_month(state.entries, args.year, args.month, participant=state.active_participant))

    if args.day:
        entry = state.entry_for(date.fromisoformat(args.day))
        if entry is None:
            print(f"No activity on {args.day}")
            return 0
        controller.open_entry(entry)
        print(f"\n{entry.title} on {args.day}:")
        for url in state.gallery:
            print(f"  {url}")
        controller.close_gallery()
    return 0


if __name__ == "__main__":
    sys.exit(main())
