"""
Directory-backed participant listings.

The storage root holds one directory per participant with image files inside.
Nothing is persisted: every call re-reads the filesystem unless a
``ListingCache`` with a positive TTL is passed in.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from activity_calendar.core.cache import ListingCache
from activity_calendar.core.exceptions import InvalidName, IOFailure, NotFound
from activity_calendar.schemas import ImageAssetRead

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp"})
ASSET_URL_PREFIX = "/participants"


def validate_name(name: str, *, kind: str = "participant", participant: Optional[str] = None) -> str:
    """Reject names that could escape the storage root or expose hidden entries."""
    if participant is None and kind == "participant":
        participant = name
    if not name or name in (".", ".."):
        raise InvalidName(f"Invalid {kind} name: {name!r}", participant=participant)
    if "/" in name or "\\" in name or "\x00" in name or os.path.basename(name) != name:
        raise InvalidName(f"Invalid {kind} name: contains path separators", participant=participant)
    if is_hidden(name):
        raise InvalidName(f"Invalid {kind} name: hidden entries not allowed", participant=participant)
    return name


def is_hidden(name: str) -> bool:
    # Covers .trash folders and macOS ._* resource forks
    return name.startswith(".")


def is_within_root(path: Path, root: Path) -> bool:
    # Symlinks inside a participant folder must not reach outside the root
    return path.resolve().is_relative_to(root.resolve())


def is_image_filename(filename: str) -> bool:
    return os.path.splitext(filename)[1].lower() in IMAGE_EXTENSIONS


def build_image_url(participant: str, filename: str) -> str:
    """Compose the asset URL with both segments fully percent-encoded."""
    return f"{ASSET_URL_PREFIX}/{quote(participant, safe='')}/{quote(filename, safe='')}"


def list_participants(root: Path, cache: Optional[ListingCache] = None) -> List[str]:
    """Return the names of all non-hidden directories directly under ``root``."""
    if cache is not None:
        cached = cache.get("participants")
        if cached is not None:
            return list(cached)

    try:
        with os.scandir(root) as it:
            names = [entry.name for entry in it if entry.is_dir() and not is_hidden(entry.name)]
    except OSError as e:
        logger.error(f"Failed to read participants directory {root}: {e}")
        raise IOFailure("Failed to read participants directory") from e

    names.sort()
    if cache is not None:
        cache.set("participants", list(names))
    return names


def list_images(
    participant: str,
    root: Path,
    cache: Optional[ListingCache] = None,
) -> List[ImageAssetRead]:
    """Return the image files in a participant's folder with their asset URLs.

    A missing folder and an unreadable one are both reported as ``IOFailure``;
    no separate not-found classification is made for unknown participants.
    """
    validate_name(participant)
    cache_key = f"images:{participant}"
    if cache is not None:
        cached = cache.get(cache_key)
        if cached is not None:
            return [ImageAssetRead(**item) for item in cached]

    folder = root / participant
    try:
        with os.scandir(folder) as it:
            filenames = [
                entry.name
                for entry in it
                if entry.is_file()
                and not is_hidden(entry.name)
                and is_image_filename(entry.name)
                and is_within_root(Path(entry.path), root)
            ]
    except OSError as e:
        logger.error(f"Failed to read folder of participant {participant!r}: {e}")
        raise IOFailure("Failed to read participant folder", participant=participant) from e

    filenames.sort()
    images = [
        ImageAssetRead(filename=name, url=build_image_url(participant, name))
        for name in filenames
    ]
    if cache is not None:
        cache.set(cache_key, [image.model_dump() for image in images])
    return images


def resolve_asset(participant: str, filename: str, root: Path) -> Path:
    """Return the on-disk path of an image asset, or raise ``NotFound``."""
    validate_name(participant)
    validate_name(filename, kind="file", participant=participant)
    if not is_image_filename(filename):
        raise NotFound(f"Not an image: {filename}", participant=participant)

    path = root / participant / filename
    if not path.is_file():
        raise NotFound(f"File not found: {participant}/{filename}", participant=participant)
    if not is_within_root(path, root):
        raise NotFound(f"File not found: {participant}/{filename}", participant=participant)
    return path
