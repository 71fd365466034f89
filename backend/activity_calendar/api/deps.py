from __future__ import annotations

from pathlib import Path
from typing import Annotated

from fastapi import Depends, Request

from activity_calendar.core.cache import ListingCache
from activity_calendar.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_participants_root(request: Request) -> Path:
    return Path(request.app.state.settings.PARTICIPANTS_DIR)


def get_listing_cache(request: Request) -> ListingCache:
    return request.app.state.listing_cache


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RootDep = Annotated[Path, Depends(get_participants_root)]
CacheDep = Annotated[ListingCache, Depends(get_listing_cache)]
