from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from activity_calendar.api.deps import CacheDep, RootDep
from activity_calendar.entries import filter_entries, group_images
from activity_calendar.schemas import CalendarEntryRead, ErrorRead, ImageAssetRead
from activity_calendar.services.participants import list_images, list_participants

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorRead},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorRead},
}


@router.get(
    "",
    response_model=List[str],
    summary="List participants",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorRead}},
)
def read_participants(root: RootDep, cache: CacheDep) -> List[str]:
    """Return the name of every participant folder."""
    return list_participants(root, cache)


@router.get(
    "/{name}/images",
    response_model=List[ImageAssetRead],
    summary="List participant images",
    responses=ERROR_RESPONSES,
)
def read_participant_images(name: str, root: RootDep, cache: CacheDep) -> List[ImageAssetRead]:
    """Return the image files of one participant with their asset URLs."""
    return list_images(name, root, cache)


@router.get(
    "/{name}/entries",
    response_model=List[CalendarEntryRead],
    summary="List participant calendar entries",
    responses=ERROR_RESPONSES,
)
def read_participant_entries(
    name: str,
    root: RootDep,
    cache: CacheDep,
    start: Optional[date] = Query(default=None, description="First day to include"),
    end: Optional[date] = Query(default=None, description="Last day to include"),
) -> List[CalendarEntryRead]:
    """Return the participant's images grouped into one entry per day, sorted by day."""
    if start and end and end < start:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end must be greater than or equal to start",
        )
    entries = group_images(name, list_images(name, root, cache))
    entries = filter_entries(entries, start=start, end=end)
    entries.sort(key=lambda entry: entry.day)
    return [CalendarEntryRead.model_validate(entry) for entry in entries]
