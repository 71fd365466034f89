from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ImageAssetRead(BaseModel):
    filename: str
    url: str

    model_config = ConfigDict(frozen=True)


class ErrorRead(BaseModel):
    error: str
