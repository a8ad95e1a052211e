from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Tag(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tag: str
    created_at: datetime | None = None


class TagsList(BaseModel):
    tags: list[Tag]
    total: int
    has_more: bool


class Reader(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    reader: str
    name: str | None = None
    created_at: datetime | None = None


class ReadersList(BaseModel):
    readers: list[Reader]
    total: int
    has_more: bool


class Asset(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    tag_id: str
    current_reader_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AssetDetail(Asset):
    tag: str
    current_reader: str | None = None


class Event(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tag: str
    reader: str
    asset_id: str | None = None
    reader_id: str | None = None
    created_at: datetime | None = None


class EventCreated(Event):
    reader_changed: bool
    previous_reader_id: str | None = None


class EventsList(BaseModel):
    events: list[Event]
    total: int
    has_more: bool
