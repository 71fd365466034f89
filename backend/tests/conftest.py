from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from activity_calendar.core.config import Settings
from activity_calendar.main import create_application

ALICE_FILES = (
    "KakaoTalk_20240101_1.jpg",
    "KakaoTalk_20240101_2.jpg",
    "KakaoTalk_20240102_1.jpg",
)


def _make_folder(root: Path, name: str, files: dict[str, bytes] | None = None) -> Path:
    dir_path = root / name
    dir_path.mkdir(parents=True, exist_ok=True)
    for rel, data in (files or {}).items():
        (dir_path / rel).write_bytes(data)
    return dir_path


@pytest.fixture()
def participants_root(tmp_path: Path) -> Path:
    root = tmp_path / "participants"
    root.mkdir()
    _make_folder(root, "alice", {name: f"image {name}".encode() for name in ALICE_FILES} | {"notes.txt": b"notes"})
    _make_folder(root, "bob", {"photo_no_digits.PNG": b"png"})
    (root / "README.md").write_text("not a participant")
    return root


@pytest.fixture()
def settings(participants_root: Path) -> Settings:
    return Settings(
        PARTICIPANTS_DIR=participants_root,
        FRONTEND_ORIGIN="http://localhost:3000",
        LISTING_CACHE_TTL=0,
        REDIS_CACHE_URL=None,
    )


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    return TestClient(create_application(settings))
