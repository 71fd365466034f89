from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class CalendarEntryRead(BaseModel):
    id: str
    title: str
    start: date
    end: date
    all_day: bool = True
    images: List[str] = []

    model_config = ConfigDict(from_attributes=True)

    @field_validator("end")
    @classmethod
    def check_same_day(cls, end: date, info: ValidationInfo) -> date:
        start: date | None = info.data.get("start")
        if start and end != start:
            raise ValueError("calendar entries span a single day")
        return end
