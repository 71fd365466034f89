from __future__ import annotations

from datetime import date

import pytest

from activity_calendar.entries import extract_date, filter_entries, find_date_digits, group_images
from activity_calendar.schemas import ImageAssetRead

TODAY = date(2025, 3, 14)


def _image(filename: str, participant: str = "alice") -> dict[str, str]:
    return {"filename": filename, "url": f"/participants/{participant}/{filename}"}


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("KakaoTalk_20230815_103000.jpg", date(2023, 8, 15)),
        ("img_2023081599999.jpg", date(2023, 8, 15)),
        ("20240229.png", date(2024, 2, 29)),
        ("a_20220101_b_20230202.jpg", date(2022, 1, 1)),
    ],
)
def test_extract_date_from_filename(filename: str, expected: date) -> None:
    assert extract_date(filename, today=TODAY) == expected


def test_marked_digits_win_over_earlier_run() -> None:
    assert find_date_digits("12345678_KakaoTalk_20230815.jpg") == "20230815"


@pytest.mark.parametrize("filename", ["photo_no_digits.png", "IMG_1234567.jpg", "20231345.jpg", "20230230.jpg"])
def test_extract_date_falls_back_to_today(filename: str) -> None:
    assert extract_date(filename, today=TODAY) == TODAY


def test_extract_date_accepts_clock_callable() -> None:
    assert extract_date("no_date.jpg", today=lambda: TODAY) == TODAY


def test_extract_date_default_clock_is_system_date() -> None:
    assert extract_date("no_date.jpg") == date.today()


def test_same_day_images_collapse_into_one_entry() -> None:
    images = [_image(f"KakaoTalk_20240101_{i}.jpg") for i in range(5)]

    entries = group_images("alice", images)

    assert len(entries) == 1
    assert entries[0].images == [image["url"] for image in images]


def test_grouping_is_complete_across_days() -> None:
    images = [
        _image("KakaoTalk_20240103_1.jpg"),
        _image("KakaoTalk_20240101_1.jpg"),
        _image("KakaoTalk_20240103_2.jpg"),
        _image("KakaoTalk_20240102_1.jpg"),
        _image("undated.jpg"),
    ]

    entries = group_images("alice", images, today=TODAY)

    assert [entry.day for entry in entries] == [
        date(2024, 1, 3),
        date(2024, 1, 1),
        date(2024, 1, 2),
        TODAY,
    ]
    urls = [url for entry in entries for url in entry.images]
    assert sorted(urls) == sorted(image["url"] for image in images)
    assert len(urls) == len(set(urls))


def test_entries_carry_id_title_and_full_day_span() -> None:
    entries = group_images("alice", [ImageAssetRead(**_image("KakaoTalk_20240101_1.jpg"))])

    entry = entries[0]
    assert entry.id == "alice-2024-01-01"
    assert entry.title == "alice activity"
    assert entry.start == entry.end == date(2024, 1, 1)
    assert entry.all_day is True


def test_base_url_prefixes_image_urls() -> None:
    entries = group_images("alice", [_image("KakaoTalk_20240101_1.jpg")], base_url="http://api.example/")
    assert entries[0].images == ["http://api.example/participants/alice/KakaoTalk_20240101_1.jpg"]


def test_end_to_end_scenario(participants_root) -> None:
    from activity_calendar.services.participants import list_images

    images = list_images("alice", participants_root)
    entries = {entry.day: entry for entry in group_images("alice", images)}

    assert len(images) == 3
    assert set(entries) == {date(2024, 1, 1), date(2024, 1, 2)}
    assert len(entries[date(2024, 1, 1)].images) == 2
    assert len(entries[date(2024, 1, 2)].images) == 1
    assert {entry.title for entry in entries.values()} == {"alice activity"}


def test_filter_entries_is_inclusive() -> None:
    entries = group_images(
        "alice",
        [_image(f"KakaoTalk_2024010{day}_1.jpg") for day in range(1, 6)],
    )

    kept = filter_entries(entries, start=date(2024, 1, 2), end=date(2024, 1, 4))

    assert [entry.day.day for entry in kept] == [2, 3, 4]
